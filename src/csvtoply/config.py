"""
Configuration & Constants
=========================
Central registry for the CSV field names, the PLY header vocabulary and the
user-tunable conversion options.

Exports:
    APP_VERSION (str): Installed package version.
    ConversionOptions: Offsets and axis/UV flags for one run.
"""
from dataclasses import dataclass
from importlib.metadata import version, PackageNotFoundError

try:
    APP_VERSION = version("csvtoply")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# CSV header names (matched case-insensitively)
FIELD_INDEX = "IDX"
FIELDS_POSITION = ("Position[0]", "Position[1]", "Position[2]")
FIELDS_NORMAL = ("Normal[0]", "Normal[1]", "Normal[2]")
FIELDS_TEXCOORD = ("Texcoord0[0]", "Texcoord0[1]")
FIELD_SECOND_TEXCOORD = "Texcoord1[0]"
FIELD_DIFFUSE = "Diffuse"

# PLY vocabulary
PLY_MAGIC = "ply"
PLY_FORMAT = "format ascii 1.0"
PLY_END_HEADER = "end_header"
PLY_FACE_PROPERTY = "property list uint8 int vertex_index"
PLY_POSITION_PROPERTIES = ("x", "y", "z")
PLY_NORMAL_PROPERTIES = ("nx", "ny", "nz")
PLY_COLOR_PROPERTIES = ("red", "green", "blue", "alpha")
PLY_TEXCOORD_PROPERTIES = ("s", "t")
CORNERS_PER_FACE = 3


@dataclass
class ConversionOptions:
    """Per-run settings taken from the command line."""
    offset_x: float = 0.0
    offset_y: float = 0.0
    offset_z: float = 0.0
    flip_uv: bool = False  # Emit V as 1 - V
    y_up: bool = False     # Keep source axes instead of converting to Z up

    @property
    def offsets(self) -> tuple[float, float, float]:
        return self.offset_x, self.offset_y, self.offset_z
