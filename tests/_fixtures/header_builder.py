"""Helper utilities for writing temporary header files in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

from rlparse.config import ParserConfig
from rlparse.models import ParseResult
from rlparse.pipeline import HeaderParser


class HeaderBuilder:
    """Utility for writing a throwaway header and parsing it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "include"
        self.root.mkdir()

    def write(self, content: str, name: str = "raylib.h") -> Path:
        """Write ``content`` (dedented) to ``name`` and return its path."""
        path = self.root / name
        normalised = textwrap.dedent(content).lstrip("\n")
        path.write_text(normalised, encoding="utf-8")
        return path

    def parse(self, content: str, **overrides: object) -> ParseResult:
        """Write ``content`` and return the parse result."""
        path = self.write(content)
        config = ParserConfig(root=self.root, input=path, **overrides)  # type: ignore[arg-type]
        return HeaderParser(config).parse()


__all__ = ["HeaderBuilder"]
