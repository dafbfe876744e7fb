"""JSON emission for parsed function records."""

from __future__ import annotations

import io
import json
from typing import Sequence, TextIO

from .models import FunctionRecord, Parameter


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


class JsonEmitter:
    """Writes function records to a text stream as one JSON document.

    Output is produced piece by piece in a fixed two-space layout. Functions
    without parameters have no ``params`` key unless ``always_emit_params`` is
    set, in which case they get an empty array.
    """

    def __init__(self, stream: TextIO, *, always_emit_params: bool = False) -> None:
        self._stream = stream
        self.always_emit_params = always_emit_params

    def emit(self, records: Sequence[FunctionRecord]) -> None:
        write = self._stream.write
        write("{\n")
        write(f'  "functions_count": {len(records)},\n')
        write('  "functions": [\n')
        for index, record in enumerate(records):
            self._write_function(record)
            write(",\n" if index < len(records) - 1 else "\n")
        write("  ]\n")
        write("}\n")

    def _write_function(self, record: FunctionRecord) -> None:
        write = self._stream.write
        write("    {\n")
        write(f'      "name": {_quote(record.name)},\n')
        write(f'      "description": {_quote(record.description)},\n')
        write(f'      "return": {_quote(record.return_type)}')
        if record.parameters:
            write(',\n      "params": [\n')
            for index, parameter in enumerate(record.parameters):
                self._write_parameter(parameter)
                write(",\n" if index < len(record.parameters) - 1 else "\n")
            write("      ]\n")
        elif self.always_emit_params:
            write(',\n      "params": []\n')
        else:
            write("\n")
        write("    }")

    def _write_parameter(self, parameter: Parameter) -> None:
        write = self._stream.write
        write("        {\n")
        write(f'          "type": {_quote(parameter.type)},\n')
        write(f'          "name": {_quote(parameter.name)}\n')
        write("        }")


def render_json(
    records: Sequence[FunctionRecord], *, always_emit_params: bool = False
) -> str:
    """Return the JSON document for ``records`` as a string."""
    buffer = io.StringIO()
    JsonEmitter(buffer, always_emit_params=always_emit_params).emit(records)
    return buffer.getvalue()


__all__ = ["JsonEmitter", "render_json"]
