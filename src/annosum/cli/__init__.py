"""Command line interface for annosum."""

from .main import app, run

__all__ = ["app", "run"]
