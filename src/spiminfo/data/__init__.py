"""SPIM directory loading and parsing."""

from .index import StackDimensions, parse_index
from .loader import DatasetInfo, DatasetLoader, load_dir
from .metadata import PixelSize, parse_metadata
from .paths import DatasetPaths, join_path, resolve, validate

__all__ = [
    "DatasetPaths",
    "DatasetInfo",
    "DatasetLoader",
    "PixelSize",
    "StackDimensions",
    "join_path",
    "resolve",
    "validate",
    "parse_index",
    "parse_metadata",
    "load_dir",
]
