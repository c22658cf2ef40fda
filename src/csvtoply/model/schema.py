"""
Header Resolution
=================
Maps the CSV header row onto column positions once, before any data row is
read. The result is an immutable ``CsvSchema`` passed to the decoder and the
emitter; optional features absent from the header stay disabled for the
whole run.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from csvtoply.config import (
    FIELD_INDEX, FIELDS_POSITION, FIELDS_NORMAL, FIELDS_TEXCOORD,
    FIELD_SECOND_TEXCOORD, FIELD_DIFFUSE,
)
from csvtoply.errors import MissingFieldError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvSchema:
    """Resolved column positions. ``None`` marks an absent feature group."""
    index: int
    position: tuple[int, int, int]
    normal: Optional[tuple[int, int, int]] = None
    texcoord: Optional[tuple[int, int]] = None
    color: Optional[int] = None
    has_second_texcoord: bool = False

    @property
    def has_normals(self) -> bool:
        return self.normal is not None

    @property
    def has_texcoords(self) -> bool:
        return self.texcoord is not None

    @property
    def has_color(self) -> bool:
        return self.color is not None

    @property
    def min_row_length(self) -> int:
        """Number of fields a row needs to cover every resolved column."""
        columns = [self.index, *self.position]
        if self.normal is not None:
            columns.extend(self.normal)
        if self.texcoord is not None:
            columns.extend(self.texcoord)
        if self.color is not None:
            columns.append(self.color)
        return max(columns) + 1


def find_column(headers: Sequence[str], name: str) -> Optional[int]:
    """Return the position of ``name`` in ``headers`` (case-insensitive) or None."""
    wanted = name.casefold()
    for i, header in enumerate(headers):
        if header.strip().casefold() == wanted:
            return i
    return None


def require_column(headers: Sequence[str], name: str) -> int:
    position = find_column(headers, name)
    if position is None:
        raise MissingFieldError(name)
    return position


def _optional_group(headers: Sequence[str], names: Sequence[str]) -> Optional[tuple[int, ...]]:
    # The first column switches the group on; the rest are then mandatory.
    first = find_column(headers, names[0])
    if first is None:
        return None
    return (first, *(require_column(headers, name) for name in names[1:]))


def resolve_schema(headers: Sequence[str]) -> CsvSchema:
    """
    Build the schema for one run.

    Raises:
        MissingFieldError: A required column, or a companion column of an
            optional group that is present, is missing.
    """
    index = require_column(headers, FIELD_INDEX)
    position = tuple(require_column(headers, name) for name in FIELDS_POSITION)
    normal = _optional_group(headers, FIELDS_NORMAL)
    texcoord = _optional_group(headers, FIELDS_TEXCOORD)
    color = find_column(headers, FIELD_DIFFUSE)

    has_second_texcoord = find_column(headers, FIELD_SECOND_TEXCOORD) is not None
    if has_second_texcoord:
        logger.warning("Input has multiple UV maps, only outputting Texcoord0")

    schema = CsvSchema(
        index=index,
        position=position,
        normal=normal,
        texcoord=texcoord,
        color=color,
        has_second_texcoord=has_second_texcoord,
    )
    logger.debug(
        f"Resolved schema: normals={schema.has_normals}, "
        f"texcoords={schema.has_texcoords}, color={schema.has_color}"
    )
    return schema
