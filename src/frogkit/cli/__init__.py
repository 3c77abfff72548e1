"""Command-line interface for frogkit."""

from .app import app

__all__ = ["app"]
