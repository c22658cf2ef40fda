"""
Conversion I/O
==============
Reads a CSV mesh export and writes the PLY file.

The input is fully decoded before the output file is opened, so a schema
or data error never leaves an output file behind.
"""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import Iterator, List, TextIO

from csvtoply.config import ConversionOptions
from csvtoply.errors import MalformedInputError
from csvtoply.model.decoder import RowDecoder
from csvtoply.model.ply import write_ply
from csvtoply.model.schema import CsvSchema, resolve_schema
from csvtoply.model.vertex import VertexTable

# Get module logger
logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    """Return object summarising one conversion."""
    rows: int
    vertices: int
    faces: int


def _rows(stream: TextIO) -> Iterator[List[str]]:
    reader = csv.reader(stream, skipinitialspace=True)
    for row in reader:
        # Skip blank lines
        if not row or all(not cell.strip() for cell in row):
            continue
        yield [cell.strip() for cell in row]


def read_csv(stream: TextIO, options: ConversionOptions | None = None) -> tuple[CsvSchema, VertexTable]:
    """
    Decode an open CSV stream.

    Raises:
        SchemaError: The header row is missing or lacks required columns.
        DataError: A data row cannot be decoded, or the text is not UTF-8 CSV.
    """
    rows = _rows(stream)
    try:
        headers = next(rows, [])
        schema = resolve_schema(headers)
        decoder = RowDecoder(schema, options)
        table = decoder.decode_all(rows)
    except (UnicodeDecodeError, csv.Error) as e:
        raise MalformedInputError(str(e)) from e
    return schema, table


def convert(input_path: str, output_path: str, options: ConversionOptions | None = None) -> ConversionStats:
    options = options or ConversionOptions()

    logger.info(f"Reading mesh CSV: {input_path}")
    with open(input_path, mode='r', encoding='utf-8-sig', newline='') as f:
        schema, table = read_csv(f, options)

    logger.info(f"Writing PLY to: {output_path}")
    with open(output_path, mode='w', encoding='utf-8', newline='\n') as f:
        write_ply(f, table, schema, options)

    stats = ConversionStats(rows=len(table.corners), vertices=len(table), faces=table.face_count)
    logger.info(f"Wrote {stats.vertices} vertices and {stats.faces} faces.")
    return stats
