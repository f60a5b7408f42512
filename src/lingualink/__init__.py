"""LinguaLink: text translation service backed by a completion API."""

__version__ = "0.1.0"
