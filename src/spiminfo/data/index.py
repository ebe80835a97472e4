"""Parsing of the index file of a SPIM dataset.

The index file lists one timepoint per line together with the stack shape::

    0	259422997515086	1, 40, 30, 20	0
    1	259422997515086	1, 40, 30, 20	0
    ...

Only the comma separated fields matter: field 1 is the width, field 2 the
height and field 3 starts with the depth.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np

from ..core.exceptions import InconsistentIndexError
from ..utils.logging import get_logger

logger = get_logger(__name__)

_INT_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class StackDimensions:
    """Dimensions of a 4D stack."""

    width: int = 0
    height: int = 0
    depth: int = 0
    timepoint_count: int = 0

    @property
    def shape(self) -> Tuple[int, int, int, int]:
        """Array shape of the stack as (t, z, y, x)."""
        return (self.timepoint_count, self.depth, self.height, self.width)

    def as_array(self) -> np.ndarray:
        """Dimensions as ``[width, height, depth, timepoint_count]``."""
        return np.array(
            [self.width, self.height, self.depth, self.timepoint_count],
            dtype=np.int64,
        )

    def to_dict(self):
        return {
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "timepoint_count": self.timepoint_count,
        }


def parse_index_line(line: str) -> Optional[Tuple[int, int, int]]:
    """Extract ``(width, height, depth)`` from one index line.

    Args:
        line: A line of the index file

    Returns:
        The parsed shape, or None if the line is malformed
    """
    tokens = line.split(",", 3)
    if len(tokens) < 4:
        return None

    width = tokens[1].strip()
    height = tokens[2].strip()
    # Depth may carry a unit or decimals ("20.5um"); keep the leading digits
    depth = _INT_RE.match(tokens[3].strip())

    if not _INT_RE.fullmatch(width) or not _INT_RE.fullmatch(height) or depth is None:
        return None

    return int(width), int(height), int(depth.group())


def parse_index(path: Union[str, Path], strict: bool = False) -> StackDimensions:
    """Parse an index file into stack dimensions.

    Malformed lines are skipped. Every parsed line counts as one timepoint,
    and the width/height/depth of the last parsed line are returned.

    Args:
        path: Path to the index file
        strict: Raise if parsed lines disagree on the stack shape

    Returns:
        StackDimensions, ``(0, 0, 0, 0)`` if no line could be parsed

    Raises:
        OSError: If the file cannot be opened
        InconsistentIndexError: In strict mode, on a shape mismatch
    """
    shape = (0, 0, 0)
    timepoints = 0
    skipped = 0

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            parsed = parse_index_line(line)
            if parsed is None:
                skipped += 1
                logger.debug(f"{path}:{line_number}: skipping line {line!r}")
                continue

            if strict and timepoints > 0 and parsed != shape:
                raise InconsistentIndexError(path, line_number, shape, parsed)

            shape = parsed
            timepoints += 1

    if skipped:
        logger.info(f"Skipped {skipped} unparsable line(s) in {path}")

    dims = StackDimensions(*shape, timepoint_count=timepoints)
    logger.info(f"Stack dimensions from {path}: {dims.as_array().tolist()}")
    return dims
