"""Exception hierarchy for spiminfo."""

from pathlib import Path
from typing import Tuple, Union


class SpimInfoError(Exception):
    """Base exception for spiminfo."""


class ConfigError(SpimInfoError, ValueError):
    """Raised when a configuration holds invalid values."""


class LoadError(SpimInfoError):
    """Raised when a SPIM directory cannot be loaded."""


class MissingPathError(LoadError):
    """Raised when a required entry of the directory layout is absent."""

    def __init__(self, path: Union[str, Path], role: str):
        self.path = Path(path)
        self.role = role
        super().__init__(f"Missing {role}: {self.path}")


class IndexFileUnreadableError(LoadError):
    """Raised when the index file exists but cannot be opened."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Could not read index file: {self.path}")


class InconsistentIndexError(LoadError):
    """Raised in strict mode when index lines disagree on the stack shape."""

    def __init__(
        self,
        path: Union[str, Path],
        line_number: int,
        expected: Tuple[int, int, int],
        found: Tuple[int, int, int],
    ):
        self.path = Path(path)
        self.line_number = line_number
        self.expected = expected
        self.found = found
        super().__init__(
            f"{self.path}:{line_number}: stack shape {found} "
            f"does not match previous lines {expected}"
        )
