"""spiminfo: metadata loader for SPIM microscopy datasets.

Reads the index and metadata files of a SPIM directory and derives the 4D
stack dimensions and the physical pixel size.
"""

__version__ = "0.1.0"

from .core import SpimConfig
from .core.exceptions import (
    IndexFileUnreadableError,
    InconsistentIndexError,
    LoadError,
    MissingPathError,
    SpimInfoError,
)
from .data import DatasetInfo, DatasetLoader, PixelSize, StackDimensions, load_dir

__all__ = [
    "SpimConfig",
    "SpimInfoError",
    "LoadError",
    "MissingPathError",
    "IndexFileUnreadableError",
    "InconsistentIndexError",
    "DatasetInfo",
    "DatasetLoader",
    "PixelSize",
    "StackDimensions",
    "load_dir",
]
