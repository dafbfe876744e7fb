"""Declaration line extraction."""

from __future__ import annotations

from typing import List

from .logging import get_logger
from .models import DeclarationLine

DEFAULT_MARKER = "RLAPI"
DEFAULT_MAX_LINE_LENGTH = 512

_logger = get_logger("extractor")


def extract_declaration_lines(
    text: str,
    *,
    marker: str = DEFAULT_MARKER,
    max_line_length: int | None = DEFAULT_MAX_LINE_LENGTH,
) -> List[DeclarationLine]:
    """Return every line of ``text`` that starts with ``marker``, in source order.

    Matching is exact and case-sensitive. Declarations continued on following
    lines are not joined: only the first physical line is returned.
    """
    if not marker:
        raise ValueError("Declaration marker must not be empty")

    lines: List[DeclarationLine] = []
    for index, line in enumerate(text.split("\n"), start=1):
        if not line.startswith(marker):
            continue
        if max_line_length is not None and len(line) > max_line_length:
            _logger.warning(
                "Line %d is %d characters long (limit %d); kept as is",
                index,
                len(line),
                max_line_length,
            )
        lines.append(DeclarationLine(text=line, line_number=index))

    _logger.debug("Found %d lines starting with %s", len(lines), marker)
    return lines


__all__ = ["DEFAULT_MARKER", "DEFAULT_MAX_LINE_LENGTH", "extract_declaration_lines"]
