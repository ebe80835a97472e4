"""Parsing of the acquisition metadata file of a SPIM dataset.

Relevant lines of ``metadata.txt`` are tab separated with the value in the
third column::

    timelapse.NumberOfPlanes	=	100.000	4636737291354636288
    timelapse.StartZ	=	25.0000	4627730092099895296
    timelapse.StopZ	=	75.0000	4634978072750194688
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ..core.config import SpimConfig
from ..utils.logging import get_logger

logger = get_logger(__name__)

START_Z_KEY = "timelapse.StartZ"
STOP_Z_KEY = "timelapse.StopZ"
NUMBER_OF_PLANES_KEY = "timelapse.NumberOfPlanes"

VALUE_COLUMN = 2


@dataclass(frozen=True)
class PixelSize:
    """Physical size of a voxel in microns."""

    x: float
    y: float
    z: float
    is_default: bool = False

    def as_array(self) -> np.ndarray:
        """Pixel size as ``[x, y, z]``."""
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def to_dict(self):
        return {"x": self.x, "y": self.y, "z": self.z, "is_default": self.is_default}


def default_pixel_size(config: Optional[SpimConfig] = None) -> PixelSize:
    """Pixel size used when no metadata can be read."""
    pixel = (config or SpimConfig()).pixel_size
    return PixelSize(pixel.lateral, pixel.lateral, pixel.default_axial, is_default=True)


def _value(line: str) -> str:
    return line.split("\t")[VALUE_COLUMN]


def parse_metadata(
    path: Union[str, Path], config: Optional[SpimConfig] = None
) -> PixelSize:
    """Parse the metadata file into a pixel size.

    The z spacing is ``(StopZ - StartZ) / (NumberOfPlanes - 1)``. Keys are
    matched as substrings of a line. A missing or unreadable file, a malformed
    value or a single plane give the default pixel size instead.

    Args:
        path: Path to the metadata file
        config: Configuration providing the pixel size constants

    Returns:
        PixelSize in microns
    """
    config = config or SpimConfig()
    path = Path(path)

    if not path.exists():
        logger.info(f"{path} does not exist, using default pixel size")
        return default_pixel_size(config)

    start_z = -1.0
    stop_z = -1.0
    number_of_planes = -1
    seen = set()

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                try:
                    if START_Z_KEY in line:
                        start_z = float(_value(line))
                        seen.add(START_Z_KEY)
                    if STOP_Z_KEY in line:
                        stop_z = float(_value(line))
                        seen.add(STOP_Z_KEY)
                    if NUMBER_OF_PLANES_KEY in line:
                        number_of_planes = int(float(_value(line)))
                        seen.add(NUMBER_OF_PLANES_KEY)
                except (ValueError, IndexError, OverflowError) as e:
                    logger.warning(
                        f"{path}:{line_number}: could not parse {line!r} ({e}), "
                        "using default pixel size"
                    )
                    return default_pixel_size(config)
    except OSError as e:
        logger.warning(f"Could not read {path} ({e}), using default pixel size")
        return default_pixel_size(config)

    missing = {START_Z_KEY, STOP_Z_KEY, NUMBER_OF_PLANES_KEY} - seen
    if missing:
        logger.warning(f"{path} lacks {', '.join(sorted(missing))}")

    logger.debug(
        f"StartZ={start_z}, StopZ={stop_z}, NumberOfPlanes={number_of_planes}"
    )

    if number_of_planes == 1:
        logger.warning(f"{path} has a single plane, using default pixel size")
        return default_pixel_size(config)

    lateral = config.pixel_size.lateral
    z = (stop_z - start_z) / (number_of_planes - 1)
    return PixelSize(lateral, lateral, z)
