"""
Row Decoding
============
Turns CSV data rows into face corners and vertices.

Numbers are parsed without any locale: floats use Python's ``float`` grammar
(``.`` as decimal separator), integers are decimal or ``0x`` hexadecimal.
Every failure raises and aborts the conversion.
"""
from __future__ import annotations

import logging
import re
from typing import Sequence

from csvtoply.config import (
    ConversionOptions, FIELD_INDEX, FIELDS_POSITION, FIELDS_NORMAL,
    FIELDS_TEXCOORD, FIELD_DIFFUSE,
)
from csvtoply.errors import ColorParseError, MalformedRowError, MalformedValueError
from csvtoply.model.schema import CsvSchema
from csvtoply.model.vertex import Color, Vertex, VertexTable

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"0[xX]([0-9a-fA-F]+)")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

# IDX values and colour channels are 32-bit signed
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

# Source order is alpha, red, green, blue
_TOKEN = r"\s*([0-9a-fA-FxX]*)\s*"
DIFFUSE_RE = re.compile(r".*\(" + ",".join([_TOKEN] * 4) + r"\)")


def parse_int(text: str, field: str = FIELD_INDEX, allow_hex: bool = False) -> int:
    value = text.strip()
    result = None
    if _DECIMAL_RE.fullmatch(value):
        result = int(value, 10)
    elif allow_hex:
        match = _HEX_RE.fullmatch(value)
        if match:
            result = int(match.group(1), 16)
    if result is None or not INT32_MIN <= result <= INT32_MAX:
        raise MalformedValueError(field, text, "32-bit integer")
    return result


def parse_float(text: str, field: str) -> float:
    value = text.strip()
    # float() alone would also take '1_000', 'inf' and 'nan'
    if not _FLOAT_RE.fullmatch(value):
        raise MalformedValueError(field, text, "float")
    return float(value)


def parse_color(text: str) -> Color:
    """
    Parse a Diffuse cell such as ``float4(0xff, 10, 20, 30)``.

    Anything may precede the parenthesised group; the group itself must hold
    exactly four comma separated integer tokens (decimal or ``0x`` hex) in
    alpha, red, green, blue order.

    Raises:
        ColorParseError: The text does not have the tuple shape.
        MalformedValueError: A token inside the tuple is not an integer.
    """
    match = DIFFUSE_RE.match(text)
    if match is None:
        raise ColorParseError(text)
    alpha, red, green, blue = (
        parse_int(token, FIELD_DIFFUSE, allow_hex=True) for token in match.groups()
    )
    return Color(red=red, green=green, blue=blue, alpha=alpha)


class RowDecoder:
    """Feeds rows into a ``VertexTable`` according to a resolved schema."""

    def __init__(
        self,
        schema: CsvSchema,
        options: ConversionOptions | None = None,
        table: VertexTable | None = None,
    ) -> None:
        self.schema = schema
        self.options = options or ConversionOptions()
        self.table = table if table is not None else VertexTable()
        self.rows_read = 0
        self.duplicates = 0

    def decode(self, row: Sequence[str]) -> None:
        self.rows_read += 1
        schema = self.schema
        if len(row) < schema.min_row_length:
            raise MalformedRowError(self.rows_read, schema.min_row_length, len(row))

        index = parse_int(row[schema.index])
        self.table.add_corner(index)
        if index in self.table:
            # First occurrence wins
            self.duplicates += 1
            return

        self.table.add_vertex(self._build_vertex(index, row))

    def decode_all(self, rows) -> VertexTable:
        for row in rows:
            self.decode(row)
        logger.debug(
            f"Decoded {self.rows_read} rows: {len(self.table)} unique vertices, "
            f"{self.duplicates} repeated indices"
        )
        return self.table

    def _build_vertex(self, index: int, row: Sequence[str]) -> Vertex:
        schema = self.schema
        position = tuple(
            parse_float(row[col], name) + offset
            for col, name, offset in zip(schema.position, FIELDS_POSITION, self.options.offsets)
        )

        texcoord = None
        if schema.texcoord is not None:
            texcoord = tuple(
                parse_float(row[col], name) for col, name in zip(schema.texcoord, FIELDS_TEXCOORD)
            )

        color = None
        if schema.color is not None:
            color = parse_color(row[schema.color])

        normal = None
        if schema.normal is not None:
            normal = tuple(
                parse_float(row[col], name) for col, name in zip(schema.normal, FIELDS_NORMAL)
            )

        return Vertex(index=index, position=position, normal=normal, texcoord=texcoord, color=color)
