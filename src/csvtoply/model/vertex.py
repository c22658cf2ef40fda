"""
Vertex Table
============
Unique vertices keyed by their source index, plus the face-corner indices
in input order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Dict, Iterator, List, Optional, Tuple

from csvtoply.config import CORNERS_PER_FACE


@dataclass(frozen=True)
class Color:
    """Unclamped RGBA channels, as found in the source."""
    red: int
    green: int
    blue: int
    alpha: int

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.red, self.green, self.blue, self.alpha


@dataclass(frozen=True)
class Vertex:
    index: int
    position: Tuple[float, float, float]
    normal: Optional[Tuple[float, float, float]] = None
    texcoord: Optional[Tuple[float, float]] = None
    color: Optional[Color] = None


@dataclass
class VertexTable:
    """
    Accumulates decoded rows.

    ``vertices`` keeps the first vertex seen for each source index; later rows
    with the same index only extend ``corners``.
    """
    vertices: Dict[int, Vertex] = field(default_factory=dict)
    corners: List[int] = field(default_factory=list)

    def __contains__(self, index: int) -> bool:
        return index in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def add_corner(self, index: int) -> None:
        self.corners.append(index)

    def add_vertex(self, vertex: Vertex) -> None:
        if vertex.index in self.vertices:
            raise ValueError(f"Vertex {vertex.index} already in table")
        self.vertices[vertex.index] = vertex

    def sorted_vertices(self) -> List[Vertex]:
        """Vertices ascending by source index."""
        return sorted(self.vertices.values(), key=attrgetter("index"))

    @property
    def face_count(self) -> int:
        return len(self.corners) // CORNERS_PER_FACE

    @property
    def leftover_corners(self) -> int:
        """Corners past the last complete triangle. These are not emitted."""
        return len(self.corners) % CORNERS_PER_FACE

    def faces(self) -> Iterator[Tuple[int, int, int]]:
        corners = self.corners
        for start in range(0, self.face_count * CORNERS_PER_FACE, CORNERS_PER_FACE):
            yield corners[start], corners[start + 1], corners[start + 2]
