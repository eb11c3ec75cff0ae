"""Blog submission moderation — submit, review, publish."""

__version__ = "0.1.0"
