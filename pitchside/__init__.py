"""Pitchside: AI content generation for football club media teams."""

__version__ = "0.1.0"
