"""Unit tests for metadata file parsing."""

import numpy as np
import pytest

from spiminfo.core import SpimConfig
from spiminfo.data.metadata import PixelSize, default_pixel_size, parse_metadata


@pytest.fixture
def metadata_file(tmp_path):
    """Return a helper writing metadata lines to a temporary file."""

    def _write(lines):
        path = tmp_path / "metadata.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


def assert_default(pixel_size):
    assert (pixel_size.x, pixel_size.y, pixel_size.z) == (0.162, 0.162, 0.5)
    assert pixel_size.is_default is True


class TestParseMetadata:
    """Tests for parse_metadata function."""

    def test_missing_file_gives_default(self, tmp_path):
        assert_default(parse_metadata(tmp_path / "metadata.txt"))

    def test_unreadable_file_gives_default(self, tmp_path):
        path = tmp_path / "metadata.txt"
        path.mkdir()
        assert_default(parse_metadata(path))

    def test_derives_z_spacing(self, metadata_file):
        path = metadata_file(
            [
                "timelapse.NumberOfPlanes\t=\t100.000\t4636737291354636288",
                "timelapse.NumberOfTimePoints\t=\t10.0000\t4632233691727265792",
                "timelapse.StartZ\t=\t25.0000\t4627730092099895296",
                "timelapse.StopZ\t=\t75.0000\t4634978072750194688",
            ]
        )
        pixel_size = parse_metadata(path)
        assert pixel_size.x == 0.162
        assert pixel_size.y == 0.162
        assert pixel_size.z == pytest.approx((75.0 - 25.0) / (100.0 - 1.0))
        assert pixel_size.is_default is False

    def test_planes_truncated_to_int(self, metadata_file):
        path = metadata_file(
            [
                "timelapse.StartZ\t=\t0\t0",
                "timelapse.StopZ\t=\t10\t0",
                "timelapse.NumberOfPlanes\t=\t11.9\t0",
            ]
        )
        assert parse_metadata(path).z == pytest.approx(1.0)

    def test_substring_match(self, metadata_file):
        path = metadata_file(
            [
                "# acquisition timelapse.StartZ\t=\t10\t0",
                "timelapse.StopZ (um)\t=\t20\t0",
                "timelapse.NumberOfPlanes\t=\t3\t0",
            ]
        )
        assert parse_metadata(path).z == pytest.approx(5.0)

    def test_last_value_wins(self, metadata_file):
        path = metadata_file(
            [
                "timelapse.StartZ\t=\t10\t0",
                "timelapse.StartZ\t=\t0\t0",
                "timelapse.StopZ\t=\t8\t0",
                "timelapse.NumberOfPlanes\t=\t5\t0",
            ]
        )
        assert parse_metadata(path).z == pytest.approx(2.0)

    def test_bad_number_discards_everything(self, metadata_file):
        path = metadata_file(
            [
                "timelapse.StartZ\t=\t25.0\t0",
                "timelapse.StopZ\t=\t75.0\t0",
                "timelapse.NumberOfPlanes\t=\tmany\t0",
            ]
        )
        assert_default(parse_metadata(path))

    def test_missing_value_column_gives_default(self, metadata_file):
        path = metadata_file(["timelapse.StartZ=25.0"])
        assert_default(parse_metadata(path))

    def test_single_plane_gives_default(self, metadata_file):
        path = metadata_file(
            [
                "timelapse.StartZ\t=\t25.0\t0",
                "timelapse.StopZ\t=\t25.0\t0",
                "timelapse.NumberOfPlanes\t=\t1\t0",
            ]
        )
        assert_default(parse_metadata(path))

    def test_absent_keys_are_not_guarded(self, metadata_file):
        # start = stop = planes = -1 gives (-1 - -1) / (-1 - 1)
        pixel_size = parse_metadata(metadata_file(["unrelated\t=\t1\t0"]))
        assert pixel_size.z == 0.0
        assert pixel_size.is_default is False

    def test_unrelated_malformed_lines_ignored(self, metadata_file):
        path = metadata_file(
            [
                "garbage without tabs",
                "timelapse.StartZ\t=\t0\t0",
                "timelapse.StopZ\t=\t9\t0",
                "timelapse.NumberOfPlanes\t=\t10\t0",
            ]
        )
        assert parse_metadata(path).z == pytest.approx(1.0)

    def test_config_lateral_pixel_size(self, metadata_file, tmp_path):
        config = SpimConfig()
        config.pixel_size.lateral = 0.1
        config.pixel_size.default_axial = 2.0

        missing = parse_metadata(tmp_path / "missing.txt", config)
        assert (missing.x, missing.y, missing.z) == (0.1, 0.1, 2.0)

        path = metadata_file(
            [
                "timelapse.StartZ\t=\t0\t0",
                "timelapse.StopZ\t=\t4\t0",
                "timelapse.NumberOfPlanes\t=\t5\t0",
            ]
        )
        pixel_size = parse_metadata(path, config)
        assert (pixel_size.x, pixel_size.y) == (0.1, 0.1)
        assert pixel_size.z == pytest.approx(1.0)


class TestPixelSize:
    """Tests for PixelSize class."""

    def test_default_pixel_size(self):
        assert_default(default_pixel_size())

    def test_as_array(self):
        arr = PixelSize(0.162, 0.162, 0.5).as_array()
        assert arr.dtype == np.float32
        np.testing.assert_allclose(arr, [0.162, 0.162, 0.5])

    def test_to_dict(self):
        assert PixelSize(1.0, 2.0, 3.0).to_dict() == {
            "x": 1.0,
            "y": 2.0,
            "z": 3.0,
            "is_default": False,
        }
