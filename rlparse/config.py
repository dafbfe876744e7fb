"""Configuration loading for rlparse (.rlparse.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .extractor import DEFAULT_MARKER, DEFAULT_MAX_LINE_LENGTH
from .splitter import DEFAULT_DESCRIPTION_LIMIT

CONFIG_FILENAME = ".rlparse.yml"
DEFAULT_INPUT = "raylib.h"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where and how the JSON document is written."""

    path: Optional[Path] = None
    always_emit_params: bool = False


@dataclass
class ParserConfig:
    """Represents the settings defined in .rlparse.yml."""

    root: Path
    input: Path
    marker: str = DEFAULT_MARKER
    encoding: str = "utf-8"
    max_line_length: Optional[int] = DEFAULT_MAX_LINE_LENGTH
    description_limit: int = DEFAULT_DESCRIPTION_LIMIT
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path, *, required: bool = False) -> ParserConfig:
    """Load configuration from disk, falling back to defaults when absent.

    With ``required`` set, a missing file raises :class:`ConfigError` instead.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        if required:
            raise ConfigError(f"Config file not found: {config_file}")
        return ParserConfig(root=root, input=root / DEFAULT_INPUT)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    input_str = _as_str(data.get("input")) or DEFAULT_INPUT
    marker = _as_str(data.get("marker")) or DEFAULT_MARKER
    encoding = _as_str(data.get("encoding")) or "utf-8"

    max_line_length: Optional[int] = DEFAULT_MAX_LINE_LENGTH
    if "max_line_length" in data:
        raw = data.get("max_line_length")
        max_line_length = None if raw is None else _as_positive_int(raw, "max_line_length")

    description_limit = DEFAULT_DESCRIPTION_LIMIT
    if data.get("description_limit") is not None:
        description_limit = _as_positive_int(data["description_limit"], "description_limit")

    output = OutputConfig()
    output_str = _as_str(data.get("output"))
    if output_str:
        output.path = root / output_str

    params_data = _as_dict(data.get("params"))
    if params_data:
        always_emit = params_data.get("always_emit")
        if always_emit is not None and not isinstance(always_emit, bool):
            raise ConfigError("params.always_emit must be true or false")
        output.always_emit_params = bool(always_emit)

    return ParserConfig(
        root=root,
        input=root / input_str,
        marker=marker,
        encoding=encoding,
        max_line_length=max_line_length,
        description_limit=description_limit,
        output=output,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_positive_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a positive integer")
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as exc:
            raise ConfigError(f"{key} must be a positive integer") from exc
    if not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key} must be a positive integer")
    return value


__all__ = ["CONFIG_FILENAME", "ConfigError", "OutputConfig", "ParserConfig", "load_config"]
