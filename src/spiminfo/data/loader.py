"""Loading of SPIM dataset directories."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.config import SpimConfig
from ..core.exceptions import ConfigError, IndexFileUnreadableError
from ..utils.logging import get_logger
from .index import StackDimensions, parse_index
from .metadata import PixelSize, parse_metadata
from .paths import DatasetPaths, resolve, validate

logger = get_logger(__name__)


@dataclass(frozen=True)
class DatasetInfo:
    """Result of loading a SPIM directory."""

    paths: DatasetPaths
    stack_dimensions: StackDimensions
    pixel_size: PixelSize

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "paths": self.paths.to_dict(),
            "stack_dimensions": self.stack_dimensions.to_dict(),
            "pixel_size": self.pixel_size.to_dict(),
        }


class DatasetLoader:
    """Loads the stack dimensions and pixel size of SPIM directories."""

    def __init__(self, config: Optional[SpimConfig] = None):
        """Initialize dataset loader.

        Args:
            config: Loader configuration, defaults to SpimConfig()

        Raises:
            ConfigError: If the configuration is invalid
        """
        self.config = config or SpimConfig()

        errors = self.config.validate()
        if errors:
            raise ConfigError("Invalid configuration: " + "; ".join(errors))

    def resolve(self, root: Union[str, Path]) -> DatasetPaths:
        return resolve(root, self.config)

    def validate(self, paths: DatasetPaths):
        validate(paths)

    def parse_index(self, path: Union[str, Path]) -> StackDimensions:
        return parse_index(path, strict=self.config.index.strict)

    def parse_metadata(self, path: Union[str, Path]) -> PixelSize:
        return parse_metadata(path, self.config)

    def load_dir(self, root: Union[str, Path]) -> DatasetInfo:
        """Load a SPIM directory.

        Args:
            root: Root directory of the dataset

        Returns:
            DatasetInfo with paths, stack dimensions and pixel size

        Raises:
            MissingPathError: If the data directory, index or data file is missing
            IndexFileUnreadableError: If the index file cannot be opened
            InconsistentIndexError: In strict mode, if index lines disagree
        """
        logger.info(f"Loading SPIM directory {root}")

        paths = self.resolve(root)
        self.validate(paths)

        try:
            stack_dimensions = self.parse_index(paths.index_file)
        except OSError as e:
            logger.error(f"Failed to read index file {paths.index_file}: {e}")
            raise IndexFileUnreadableError(paths.index_file) from e

        pixel_size = self.parse_metadata(paths.metadata_file)

        info = DatasetInfo(
            paths=paths,
            stack_dimensions=stack_dimensions,
            pixel_size=pixel_size,
        )
        logger.info(
            f"Loaded {root}: stack {stack_dimensions.as_array().tolist()}, "
            f"pixel size {pixel_size.as_array().tolist()}"
        )
        return info


def load_dir(root: Union[str, Path], config: Optional[SpimConfig] = None) -> DatasetInfo:
    """Load a SPIM directory with the given configuration.

    See DatasetLoader.load_dir.
    """
    return DatasetLoader(config).load_dir(root)
