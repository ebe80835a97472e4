"""Path helpers and the directory layout of a SPIM dataset.

A SPIM directory is expected to look like::

    <root>/
        metadata.txt
        data/
            index.txt
            data.bin
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..core.config import SpimConfig
from ..core.exceptions import MissingPathError
from ..utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def join_path(path1: PathLike, path2: PathLike) -> str:
    """Join two paths, ignoring separators at the join point.

    ``join_path("a/", "/b")`` and ``join_path("a", "b")`` both give ``"a/b"``.
    """
    tail = str(path2).lstrip("/\\")
    return str(Path(path1) / tail)


def get_parent_dir(path: Optional[PathLike]) -> Optional[str]:
    """Absolute path of the directory containing ``path``."""
    if path is None:
        return None
    return str(Path(path).absolute().parent)


def get_working_dir(path: Optional[PathLike]) -> Optional[str]:
    """Absolute form of ``path``."""
    if path is None:
        return None
    return str(Path(path).absolute())


@dataclass(frozen=True)
class DatasetPaths:
    """Paths of the entries of a SPIM directory."""

    root: Path
    data_dir: Path
    index_file: Path
    data_file: Path
    metadata_file: Path

    def to_dict(self):
        return {
            "root": str(self.root),
            "data_dir": str(self.data_dir),
            "index_file": str(self.index_file),
            "data_file": str(self.data_file),
            "metadata_file": str(self.metadata_file),
        }


def resolve(root: PathLike, config: Optional[SpimConfig] = None) -> DatasetPaths:
    """Derive the dataset paths below ``root``.

    No existence checks are made.

    Args:
        root: Root directory of the SPIM dataset
        config: Configuration providing the layout names

    Returns:
        DatasetPaths for the root
    """
    layout = (config or SpimConfig()).layout

    data_dir = join_path(root, layout.data_dir_name)
    return DatasetPaths(
        root=Path(root),
        data_dir=Path(data_dir),
        index_file=Path(join_path(data_dir, layout.index_name)),
        data_file=Path(join_path(data_dir, layout.data_name)),
        metadata_file=Path(join_path(root, layout.metadata_name)),
    )


def validate(paths: DatasetPaths):
    """Check that the required entries of the layout exist.

    The data directory, index file and data file are checked in that order.
    The metadata file is optional.

    Args:
        paths: Resolved dataset paths

    Raises:
        MissingPathError: For the first missing entry
    """
    required = [
        (paths.data_dir, "data directory"),
        (paths.index_file, "index file"),
        (paths.data_file, "data file"),
    ]
    for path, role in required:
        if not path.exists():
            logger.error(f"Missing {role}: {path}")
            raise MissingPathError(path, role)
