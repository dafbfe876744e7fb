"""Header file loading."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .models import SourceText

_logger = get_logger("loader")


class FileUnreadable(RuntimeError):
    """Raised when the header file is missing, unreadable or empty."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


def load_source(path: Path | str, *, encoding: str = "utf-8") -> SourceText:
    """Read the whole header into memory.

    The file is read in text mode, so ``\\r\\n`` pairs arrive as ``\\n``. Offsets
    in the returned text therefore refer to the translated contents, not the raw
    bytes on disk.
    """
    source_path = Path(path).expanduser()
    if not source_path.is_file():
        raise FileUnreadable(source_path, "file not found")

    try:
        with source_path.open("rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise FileUnreadable(source_path, exc.strerror or str(exc)) from exc

    if not raw:
        raise FileUnreadable(source_path, "file is empty")

    try:
        decoded = raw.decode(encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise FileUnreadable(source_path, f"cannot decode as {encoding}: {exc}") from exc

    if decoded.startswith("\ufeff"):
        _logger.debug("Dropping byte-order mark from %s", source_path)
        decoded = decoded[1:]

    if "\r" in decoded:
        _logger.debug(
            "Translating CRLF line endings in %s; offsets follow the translated text",
            source_path,
        )
        decoded = decoded.replace("\r\n", "\n").replace("\r", "\n")

    _logger.debug("Loaded %d bytes from %s", len(raw), source_path)
    return SourceText(path=source_path, text=decoded, length=len(decoded))


__all__ = ["FileUnreadable", "load_source"]
