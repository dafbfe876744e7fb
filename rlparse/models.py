"""Core data models shared across rlparse stages."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class SourceText:
    """Full contents of a header file, after newline translation."""

    path: Path
    text: str
    length: int


@dataclass(frozen=True)
class DeclarationLine:
    """One physical source line that starts with the declaration marker."""

    text: str
    line_number: int


@dataclass
class Parameter:
    """A single `(type, name)` pair from a parameter list."""

    type: str
    name: str


@dataclass
class FunctionRecord:
    """Structured metadata for one declared function."""

    return_type: str
    name: str
    parameters: List[Parameter] = field(default_factory=list)
    description: str = ""
    line_number: int = 0


@dataclass
class ParseResult:
    """Outcome of parsing one header file."""

    source: Path
    records: List[FunctionRecord]

    @property
    def functions_count(self) -> int:
        return len(self.records)
