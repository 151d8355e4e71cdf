"""Qt integration for the layout editor."""

from .notifier import ClassificationNotifier

__all__ = ["ClassificationNotifier"]
