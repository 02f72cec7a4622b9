"""Audio signal helpers, versioning and settings for a speech transcription application."""

__version__ = "0.1.2"