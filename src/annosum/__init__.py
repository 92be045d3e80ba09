"""annosum – inline numeric annotation aggregator."""

from ._version import __version__

__all__ = [
    "__version__",
    "aggregate",
    "cli",
    "config",
    "errors",
    "extraction",
    "pipeline",
    "report",
    "sources",
    "utils",
]
