"""Finder screen module exports."""

from ecsnav.screens.finder.finder_screen import FinderScreen

__all__ = ["FinderScreen"]
