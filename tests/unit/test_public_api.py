"""Unit tests for the package's public surface."""

import embedfile


def test_exports_are_importable() -> None:
    for name in embedfile.__all__:
        assert hasattr(embedfile, name), name


def test_version() -> None:
    assert isinstance(embedfile.__version__, str)
    assert embedfile.__version__.count(".") == 2


def test_read_error_is_an_oserror() -> None:
    assert issubclass(embedfile.EmbeddedFileReadError, OSError)
