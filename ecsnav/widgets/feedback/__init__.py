"""Feedback widgets."""

from ecsnav.widgets.feedback.custom_dialog import InformationalDialog

__all__ = ["InformationalDialog"]
