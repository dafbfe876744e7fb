"""Single-pass pipeline: load, extract, split, emit."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from .config import DEFAULT_INPUT, ParserConfig
from .emitter import JsonEmitter
from .extractor import extract_declaration_lines
from .loader import load_source
from .logging import get_logger
from .models import ParseResult
from .splitter import parse_declarations


class HeaderParser:
    """Runs the extraction stages for one header file."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        if config is None:
            root = Path.cwd()
            config = ParserConfig(root=root, input=root / DEFAULT_INPUT)
        self.config = config
        self.logger = get_logger("pipeline")

    def parse(self, path: Path | None = None) -> ParseResult:
        """Load ``path`` (or the configured input) and return its function records.

        Raises :class:`~rlparse.loader.FileUnreadable` when the file cannot be
        loaded. Problems in individual declarations never abort the run.
        """
        config = self.config
        source = load_source(path or config.input, encoding=config.encoding)
        self.logger.debug("Scanning %s for %s declarations", source.path, config.marker)

        lines = extract_declaration_lines(
            source.text,
            marker=config.marker,
            max_line_length=config.max_line_length,
        )
        records = parse_declarations(
            lines,
            marker=config.marker,
            description_limit=config.description_limit,
        )
        self.logger.info("Parsed %d functions from %s", len(records), source.path)
        return ParseResult(source=source.path, records=records)

    def emit(self, result: ParseResult, stream: TextIO) -> None:
        """Write the JSON document for ``result`` to ``stream``."""
        emitter = JsonEmitter(stream, always_emit_params=self.config.output.always_emit_params)
        emitter.emit(result.records)


__all__ = ["HeaderParser"]
