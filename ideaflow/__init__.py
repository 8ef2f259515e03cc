"""IdeaFlow: anonymous-first idea capture API."""

__version__ = "0.1.0"
