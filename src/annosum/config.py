"""Centralized configuration for annosum runs.

:func:`get_settings` returns the effective scanning options. Values come from
environment variables (``ANNOSUM_WORKERS``, ``ANNOSUM_CHUNK_SIZE``,
``ANNOSUM_ENCODING``, ``ANNOSUM_LOG_FILE``) or from a TOML/YAML document named
by ``ANNOSUM_CONFIG_FILE``, whose ``[summarize]`` section uses the same keys in
lower case. Environment variables win over the document.
"""
from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigurationError
from .pipeline import DEFAULT_CHUNK_SIZE

__all__ = ["Settings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None


@dataclass(frozen=True)
class Settings:
    """Resolved options for a summarization run."""

    workers: int = 1
    chunk_size: int = DEFAULT_CHUNK_SIZE
    encoding: str = "utf-8"
    log_file: Optional[Path] = None

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as plain values (useful for logging)."""

        return {
            "workers": self.workers,
            "chunk_size": self.chunk_size,
            "encoding": self.encoding,
            "log_file": str(self.log_file) if self.log_file else None,
        }


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with path.open("rb") as handle:
                return tomllib.load(handle)
        if suffix in {".yaml", ".yml"}:
            with path.open("r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle)
                return loaded or {}
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Config file '{path}' is not valid {suffix[1:].upper()}") from exc
    raise ConfigurationError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Any) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _positive_int(name: str, value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"'{name}' must be an integer, got {value!r}") from exc
    if number < 1:
        raise ConfigurationError(f"'{name}' must be at least 1, got {number}")
    return number


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = config_file.expanduser().resolve()
        config_data = _load_config_file(config_file)
        config_dir = config_file.parent

    section = _coalesce_mapping(config_data.get("summarize"))
    env = os.environ

    workers = _positive_int("workers", env.get("ANNOSUM_WORKERS") or section.get("workers", 1))
    chunk_size = _positive_int(
        "chunk_size", env.get("ANNOSUM_CHUNK_SIZE") or section.get("chunk_size", DEFAULT_CHUNK_SIZE)
    )
    encoding = str(env.get("ANNOSUM_ENCODING") or section.get("encoding") or "utf-8")

    log_file: Optional[Path] = None
    raw_log = env.get("ANNOSUM_LOG_FILE") or section.get("log_file")
    if raw_log:
        log_file = Path(raw_log).expanduser()
        if not log_file.is_absolute() and config_dir is not None and not env.get("ANNOSUM_LOG_FILE"):
            log_file = config_dir / log_file

    return Settings(workers=workers, chunk_size=chunk_size, encoding=encoding, log_file=log_file)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit configuration document. The resulting instance is
        not cached, so callers (e.g. tests) can override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file))

    env_path = os.getenv("ANNOSUM_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
