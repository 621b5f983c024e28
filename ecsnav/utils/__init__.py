"""Utility helpers for the ecsnav TUI."""
