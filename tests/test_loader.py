"""Tests for rlparse.loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from rlparse.loader import FileUnreadable, load_source


def test_load_source_reads_whole_file(tmp_path: Path) -> None:
    header = tmp_path / "raylib.h"
    header.write_text("#define X 1\nRLAPI void A(void);\n", encoding="utf-8")

    source = load_source(header)

    assert source.path == header
    assert source.text == "#define X 1\nRLAPI void A(void);\n"
    assert source.length == len(source.text)


def test_load_source_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileUnreadable) as excinfo:
        load_source(tmp_path / "missing.h")
    assert excinfo.value.path == tmp_path / "missing.h"
    assert "file not found" in str(excinfo.value)


def test_load_source_directory_is_unreadable(tmp_path: Path) -> None:
    with pytest.raises(FileUnreadable):
        load_source(tmp_path)


def test_load_source_empty_file(tmp_path: Path) -> None:
    header = tmp_path / "raylib.h"
    header.write_bytes(b"")
    with pytest.raises(FileUnreadable, match="empty"):
        load_source(header)


def test_load_source_translates_crlf(tmp_path: Path) -> None:
    header = tmp_path / "raylib.h"
    header.write_bytes(b"// header\r\nRLAPI void A(void);\r\n")

    source = load_source(header)

    assert source.text == "// header\nRLAPI void A(void);\n"
    assert source.length == len(source.text)


def test_load_source_undecodable_file(tmp_path: Path) -> None:
    header = tmp_path / "raylib.h"
    header.write_bytes(b"RLAPI void A(void); // \xff\xfe\n")
    with pytest.raises(FileUnreadable, match="cannot decode"):
        load_source(header)


def test_load_source_honours_encoding(tmp_path: Path) -> None:
    header = tmp_path / "raylib.h"
    header.write_bytes("RLAPI void A(void); // café\n".encode("latin-1"))

    source = load_source(header, encoding="latin-1")

    assert source.text.endswith("café\n")


def test_load_source_drops_byte_order_mark(tmp_path: Path) -> None:
    header = tmp_path / "raylib.h"
    header.write_bytes(b"\xef\xbb\xbfRLAPI void First(void);\nRLAPI void Second(void);\n")

    source = load_source(header)

    assert source.text.startswith("RLAPI void First(void);")
