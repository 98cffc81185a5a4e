"""Threadle: a daily guess-the-thread puzzle built from redacted comments."""

__version__ = "1.0.0"
