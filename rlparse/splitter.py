"""Splitting declaration lines into function records."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .extractor import DEFAULT_MARKER
from .logging import get_logger
from .models import DeclarationLine, FunctionRecord, Parameter

DEFAULT_DESCRIPTION_LIMIT = 127
# Leading comment punctuation dropped from every description, conventionally "// ".
_COMMENT_PREFIX_LENGTH = 3

_logger = get_logger("splitter")


class MalformedDeclaration(ValueError):
    """Raised when a type + name fragment has no usable boundary."""

    def __init__(self, fragment: str) -> None:
        super().__init__(f"No type/name boundary in {fragment!r}")
        self.fragment = fragment


def split_type_and_name(fragment: str) -> Tuple[str, str]:
    """Split ``fragment`` into ``(type, name)`` at its rightmost space or ``*``.

    A ``*`` boundary stays with the type (``"Image *LoadImage"`` gives
    ``("Image *", "LoadImage")``); a space boundary is dropped. The first
    character is never treated as a boundary. This is a heuristic: multi-word
    names and function pointers are not understood.
    """
    for index in range(len(fragment) - 1, 0, -1):
        char = fragment[index]
        if char == " ":
            return fragment[:index], fragment[index + 1 :]
        if char == "*":
            return fragment[: index + 1], fragment[index + 1 :]
    raise MalformedDeclaration(fragment)


def extract_description(
    text: str, start: int, *, limit: int = DEFAULT_DESCRIPTION_LIMIT
) -> str:
    """Return the trailing ``//`` comment found at or after ``start``.

    At most ``limit`` characters are taken from the first ``/``; anything past
    that is dropped without notice. Backslashes become spaces and double quotes
    become single quotes.
    """
    slash = text.find("/", start)
    if slash == -1:
        return ""
    raw = text[slash : slash + limit]
    cleaned = raw.replace("\\", " ").replace('"', "'")
    return cleaned[_COMMENT_PREFIX_LENGTH:]


def parse_declaration(
    line: DeclarationLine,
    *,
    marker: str = DEFAULT_MARKER,
    description_limit: int = DEFAULT_DESCRIPTION_LIMIT,
) -> FunctionRecord:
    """Build a :class:`FunctionRecord` from one declaration line.

    Never raises for malformed input: parts that cannot be determined are left
    empty and a warning is logged.
    """
    text = line.text
    record = FunctionRecord(return_type="", name="", line_number=line.line_number)

    open_index = text.find("(")
    if open_index == -1:
        _logger.warning("Line %d has no parameter list: %s", line.line_number, text)
        description_start = 0
    else:
        head = text[len(marker) + 1 : open_index]
        record.return_type, record.name = _split_or_empty(head, line)
        record.parameters, description_start = _split_parameters(text, open_index + 1, line)

    record.description = extract_description(text, description_start, limit=description_limit)
    return record


def parse_declarations(
    lines: Iterable[DeclarationLine],
    *,
    marker: str = DEFAULT_MARKER,
    description_limit: int = DEFAULT_DESCRIPTION_LIMIT,
) -> List[FunctionRecord]:
    """Parse every line, keeping input order."""
    return [
        parse_declaration(line, marker=marker, description_limit=description_limit)
        for line in lines
    ]


def _split_parameters(
    text: str, start: int, line: DeclarationLine
) -> Tuple[List[Parameter], int]:
    """Collect parameters after the opening parenthesis.

    Returns the parameters and the offset where the description scan begins.
    """
    parameters: List[Parameter] = []
    fragment_start = start
    for index in range(start, len(text)):
        char = text[index]
        if char == ",":
            parameters.append(_parameter(text[fragment_start:index], line))
            fragment_start = index + 1
            if text[index + 1 : index + 2] == " ":
                fragment_start += 1
        elif char == ")":
            fragment = text[fragment_start:index]
            if not parameters and (
                text[max(index - 4, 0) : index] == "void" or not fragment.strip()
            ):
                return parameters, index + 2
            parameters.append(_parameter(fragment, line))
            return parameters, index + 2

    _logger.warning(
        "Line %d has an unterminated parameter list; declarations spanning "
        "several lines are not supported",
        line.line_number,
    )
    return parameters, 0


def _parameter(fragment: str, line: DeclarationLine) -> Parameter:
    param_type, param_name = _split_or_empty(fragment, line)
    return Parameter(type=param_type, name=param_name)


def _split_or_empty(fragment: str, line: DeclarationLine) -> Tuple[str, str]:
    try:
        return split_type_and_name(fragment)
    except MalformedDeclaration as exc:
        _logger.warning("Line %d: %s", line.line_number, exc)
        return "", ""


__all__ = [
    "DEFAULT_DESCRIPTION_LIMIT",
    "MalformedDeclaration",
    "extract_description",
    "parse_declaration",
    "parse_declarations",
    "split_type_and_name",
]
