"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest


INDEX_LINES = [
    "0\t259422997515086\t1, 40, 30, 20\t0",
    "1\t259422997515086\t1, 40, 30, 20\t0",
    "garbage line",
    "2\t259422997515086\t1, 40, 30, 20\t0",
]

METADATA_LINES = [
    "timelapse.NumberOfPlanes\t=\t100.000\t4636737291354636288",
    "timelapse.NumberOfTimePoints\t=\t10.0000\t4632233691727265792",
    "timelapse.StartZ\t=\t25.0000\t4627730092099895296",
    "timelapse.StopZ\t=\t75.0000\t4634978072750194688",
]


def write_lines(path: Path, lines):
    """Write lines to a text file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def tmp_config_dir():
    """Create temporary directory for config files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def spim_root(tmp_path):
    """Create a minimal valid SPIM directory.

    Returns:
        Path: Root with metadata.txt, data/index.txt and data/data.bin
    """
    root = tmp_path / "spim"
    write_lines(root / "data" / "index.txt", INDEX_LINES)
    (root / "data" / "data.bin").write_bytes(b"\x00" * 16)
    write_lines(root / "metadata.txt", METADATA_LINES)
    return root


@pytest.fixture
def sample_config_dict():
    """Create a sample configuration dictionary.

    Returns:
        dict: Configuration dictionary
    """
    return {
        "layout": {
            "data_dir_name": "raw",
            "index_name": "frames.txt",
        },
        "pixel_size": {
            "lateral": 0.2,
        },
        "index": {
            "strict": True,
        },
        "log_level": "DEBUG",
    }
