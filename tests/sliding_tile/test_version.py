"""Tests for sliding_tile.version: display version constants."""

from importlib.metadata import PackageNotFoundError, version as pkg_version

from sliding_tile.version import APP_ID, APP_NAME, DISTRIBUTION_NAME, VERSION


def test_version_is_string():
    assert isinstance(VERSION, str)
    assert len(VERSION) > 0


def test_app_identity():
    assert APP_NAME == "Sliding Tile"
    assert APP_ID == "com.fgtp.sliding_tile"
    assert DISTRIBUTION_NAME == "sliding-tile"


def test_version_matches_metadata():
    """VERSION matches installed metadata, or the source-checkout fallback."""
    try:
        expected = pkg_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        expected = "0.0.0+unknown"
    assert VERSION == expected
