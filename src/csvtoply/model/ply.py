"""
PLY Emission
============
Renders a decoded ``VertexTable`` as an ASCII PLY document.

The header depends on the total vertex and face counts, so the table must be
complete before any line is produced.
"""
from __future__ import annotations

import logging
from typing import List, TextIO, TYPE_CHECKING

import numpy as np

from csvtoply.config import (
    ConversionOptions, CORNERS_PER_FACE, PLY_MAGIC, PLY_FORMAT, PLY_END_HEADER,
    PLY_FACE_PROPERTY, PLY_POSITION_PROPERTIES, PLY_NORMAL_PROPERTIES,
    PLY_COLOR_PROPERTIES, PLY_TEXCOORD_PROPERTIES,
)
from csvtoply.model.schema import CsvSchema
from csvtoply.model.vertex import VertexTable

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def format_float(value: float) -> str:
    """Shortest text that round-trips the value as float32 (``1``, ``-2``, ``0.75``)."""
    return np.format_float_positional(np.float32(value), trim='-')


def to_z_up(xyz: npt.NDArray[np.float32]) -> npt.NDArray[np.float32]:
    """Convert Y-up rows (X, Y, Z) to Z-up rows (X, Z, -Y)."""
    # Adding zero turns -0.0 into 0.0
    return np.column_stack((xyz[:, 0], xyz[:, 2], -xyz[:, 1] + np.float32(0.0)))


def build_header(schema: CsvSchema, vertex_count: int, face_count: int) -> List[str]:
    lines = [PLY_MAGIC, PLY_FORMAT, f"element vertex {vertex_count}"]
    lines += [f"property float {name}" for name in PLY_POSITION_PROPERTIES]
    if schema.has_normals:
        lines += [f"property float {name}" for name in PLY_NORMAL_PROPERTIES]
    if schema.has_color:
        lines += [f"property uchar {name}" for name in PLY_COLOR_PROPERTIES]
    if schema.has_texcoords:
        lines += [f"property float {name}" for name in PLY_TEXCOORD_PROPERTIES]
    lines += [f"element face {face_count}", PLY_FACE_PROPERTY, PLY_END_HEADER]
    return lines


def vertex_lines(
    table: VertexTable,
    schema: CsvSchema,
    options: ConversionOptions | None = None,
) -> List[str]:
    """One line per vertex, ascending by source index."""
    options = options or ConversionOptions()
    vertices = table.sorted_vertices()
    if not vertices:
        return []

    columns: List[List[str]] = []

    positions = np.array([v.position for v in vertices], dtype=np.float32)
    if not options.y_up:
        positions = to_z_up(positions)
    columns.append([" ".join(format_float(x) for x in row) for row in positions])

    if schema.has_normals:
        normals = np.array([v.normal for v in vertices], dtype=np.float32)
        if not options.y_up:
            normals = to_z_up(normals)
        columns.append([" ".join(format_float(x) for x in row) for row in normals])

    if schema.has_color:
        columns.append([" ".join(str(c) for c in v.color.as_tuple()) for v in vertices])

    if schema.has_texcoords:
        uvs = np.array([v.texcoord for v in vertices], dtype=np.float32)
        if options.flip_uv:
            uvs[:, 1] = np.float32(1.0) - uvs[:, 1]
        columns.append([" ".join(format_float(x) for x in row) for row in uvs])

    return [" ".join(parts) for parts in zip(*columns)]


def face_lines(table: VertexTable) -> List[str]:
    """One ``3 a b c`` line per complete triangle, indices as read from the CSV."""
    return [f"{CORNERS_PER_FACE} {a} {b} {c}" for a, b, c in table.faces()]


def render_ply(
    table: VertexTable,
    schema: CsvSchema,
    options: ConversionOptions | None = None,
) -> List[str]:
    """All lines of the document, without line terminators."""
    if table.leftover_corners:
        logger.warning(
            f"{len(table.corners)} face corners is not a multiple of {CORNERS_PER_FACE}, "
            f"dropping the last {table.leftover_corners}"
        )
    lines = build_header(schema, len(table), table.face_count)
    lines += vertex_lines(table, schema, options)
    lines += face_lines(table)
    return lines


def write_ply(
    stream: TextIO,
    table: VertexTable,
    schema: CsvSchema,
    options: ConversionOptions | None = None,
) -> None:
    for line in render_ply(table, schema, options):
        stream.write(line)
        stream.write("\n")
