from __future__ import annotations

from typing import Sequence

import pytest

REQUIRED_HEADERS = ["VTX", "IDX", "Position[0]", "Position[1]", "Position[2]"]


def make_csv(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    lines = [", ".join(headers)]
    for row in rows:
        lines.append(", ".join(str(cell) for cell in row))
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text into tmp_path and return the path as str."""
    def _write(text: str, name: str = "mesh.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def triangle_csv() -> str:
    return make_csv(
        REQUIRED_HEADERS,
        [
            [0, 0, 1, 2, 3],
            [1, 1, 4, 5, 6],
            [2, 2, 7, 8, 9],
        ],
    )
