"""Convert PIX mesh CSV exports to ASCII PLY files."""
from csvtoply.config import APP_VERSION as __version__, ConversionOptions
from csvtoply.model.io import convert, read_csv

__all__ = ["__version__", "ConversionOptions", "convert", "read_csv"]
