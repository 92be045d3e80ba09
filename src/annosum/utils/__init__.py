"""Shared helpers."""

from .logging import RunEvents, configure_json_logger

__all__ = ["RunEvents", "configure_json_logger"]
