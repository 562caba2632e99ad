"""Test cases for the EmbeddedFile value."""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest
from rich.pretty import pretty_repr

from embedfile.cache import RuntimeContentCache
from embedfile.exceptions import EmbeddedFileReadError
from embedfile.file import EmbeddedFile
from embedfile.metadata import Metadata
from embedfile.resolution.disk import CachedDiskRead
from embedfile.resolution.static import StaticBytes


@pytest.fixture
def metadata() -> Metadata:
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    return Metadata(accessed=moment, created=moment, modified=moment)


class TestProductionFile:
    """EmbeddedFile under the default production strategy."""

    def test_hello_scenario(self) -> None:
        f = EmbeddedFile("a/b.txt", b"hello")

        assert f.path() == Path("a/b.txt")
        assert f.contents() == b"hello"
        assert list(f.contents()) == [104, 101, 108, 108, 111]
        assert f.contents_utf8() == "hello"

    def test_uses_static_strategy(self) -> None:
        f = EmbeddedFile("a/b.txt", b"hello", "/ignored")

        assert isinstance(f.resolver, StaticBytes)
        assert f.root_prefix is None

    def test_contents_are_deterministic(self) -> None:
        f = EmbeddedFile("x.bin", bytes(range(256)))
        assert f.contents() == f.contents()
        assert f.contents() is f.contents()

    def test_utf8_multibyte(self) -> None:
        text = "héllo wörld ✓"
        f = EmbeddedFile("t.txt", text.encode("utf-8"))
        assert f.contents_utf8() == text

    @pytest.mark.parametrize(
        "payload",
        [b"\xff", b"\xc3", b"abc\x80def", b"\xed\xa0\x80"],
    )
    def test_invalid_utf8_returns_none(self, payload: bytes) -> None:
        assert EmbeddedFile("bad.bin", payload).contents_utf8() is None

    def test_empty_file(self) -> None:
        f = EmbeddedFile("empty.txt", b"")
        assert f.contents() == b""
        assert f.contents_utf8() == ""

    def test_construction_does_no_io(self) -> None:
        resolver = Mock(spec=StaticBytes)
        EmbeddedFile("a.txt", b"", resolver=resolver)
        resolver.resolve.assert_not_called()


class TestImmutability:
    """EmbeddedFile values cannot be modified after construction."""

    def test_setattr_rejected(self) -> None:
        f = EmbeddedFile("a.txt", b"x")
        with pytest.raises(AttributeError):
            f._path = "other"  # type: ignore[misc]
        assert f.path() == Path("a.txt")

    def test_delattr_rejected(self) -> None:
        f = EmbeddedFile("a.txt", b"x")
        with pytest.raises(AttributeError):
            del f._path  # type: ignore[misc]


class TestMetadata:
    """Builder-style metadata attachment."""

    def test_absent_by_default(self) -> None:
        assert EmbeddedFile("a.txt", b"x").metadata() is None

    def test_with_metadata_returns_new_value(self, metadata: Metadata) -> None:
        original = EmbeddedFile("a.txt", b"x")
        alias = original

        updated = original.with_metadata(metadata)

        assert updated is not original
        assert updated.metadata() == metadata
        assert alias.metadata() is None
        assert updated.path() == original.path()
        assert updated.resolver is original.resolver

    def test_metadata_participates_in_equality(self, metadata: Metadata) -> None:
        plain = EmbeddedFile("a.txt", b"x")
        assert plain.with_metadata(metadata) != plain
        assert plain.with_metadata(metadata) == plain.with_metadata(metadata)


class TestEquality:
    """Equality compares path, resolved contents and metadata."""

    def test_equal_values(self) -> None:
        assert EmbeddedFile("a.txt", b"x") == EmbeddedFile("a.txt", b"x")

    def test_different_path(self) -> None:
        assert EmbeddedFile("a.txt", b"x") != EmbeddedFile("b.txt", b"x")

    def test_different_contents(self) -> None:
        assert EmbeddedFile("a.txt", b"x") != EmbeddedFile("a.txt", b"y")

    def test_not_equal_to_other_types(self) -> None:
        assert EmbeddedFile("a.txt", b"x") != "a.txt"

    def test_hash_consistent_with_equality(self) -> None:
        files = {EmbeddedFile("a.txt", b"x"), EmbeddedFile("a.txt", b"x")}
        assert len(files) == 1

    def test_path_mismatch_skips_content_resolution(self) -> None:
        resolver = Mock(spec=StaticBytes)
        left = EmbeddedFile("a.txt", resolver=resolver)
        right = EmbeddedFile("b.txt", resolver=resolver)

        assert left != right
        resolver.resolve.assert_not_called()


class TestRendering:
    """Debug rendering shows a length, never the bytes."""

    def test_repr_production(self) -> None:
        f = EmbeddedFile("a/b.txt", b"hello")
        assert repr(f) == "EmbeddedFile(path='a/b.txt', contents=<5 bytes>, metadata=None)"

    def test_repr_zero_length(self) -> None:
        assert "contents=<0 bytes>" in repr(EmbeddedFile("e", b""))

    def test_repr_large_file_hides_bytes(self) -> None:
        f = EmbeddedFile("big.bin", b"Z" * 100_000)
        rendered = repr(f)
        assert "<100000 bytes>" in rendered
        assert "ZZZ" not in rendered

    def test_repr_includes_metadata(self, metadata: Metadata) -> None:
        rendered = repr(EmbeddedFile("a", b"x").with_metadata(metadata))
        assert "metadata=Metadata(" in rendered

    def test_rich_pretty_repr(self) -> None:
        rendered = pretty_repr(EmbeddedFile("a/b.txt", b"hello"))
        assert "a/b.txt" in rendered
        assert "<5 bytes>" in rendered
        assert "hello" not in rendered

    def test_repr_development_includes_prefix(
        self, content_cache: RuntimeContentCache
    ) -> None:
        resolver = CachedDiskRead("/srv", cache=content_cache, reader=Mock())
        rendered = repr(EmbeddedFile("a.txt", b"", resolver=resolver))

        assert "prefix='/srv'" in rendered
        assert "contents=<0 bytes>" in rendered

    def test_repr_development_does_no_io(
        self, content_cache: RuntimeContentCache
    ) -> None:
        reader = Mock(return_value=b"abc")
        resolver = CachedDiskRead("/srv", cache=content_cache, reader=reader)
        f = EmbeddedFile("a.txt", b"", resolver=resolver)

        repr(f)
        reader.assert_not_called()

        f.contents()
        assert "contents=<3 bytes>" in repr(f)


@pytest.mark.usefixtures("development_mode")
class TestDevelopmentFile:
    """EmbeddedFile under the development strategy."""

    def test_selects_disk_strategy(self, asset_root: Path) -> None:
        f = EmbeddedFile("a/b.txt", b"", str(asset_root))

        assert isinstance(f.resolver, CachedDiskRead)
        assert f.root_prefix == str(asset_root)

    def test_requires_root_prefix(self) -> None:
        with pytest.raises(ValueError):
            EmbeddedFile("a/b.txt", b"hello")

    def test_reads_disk_not_placeholder(self, asset_root: Path) -> None:
        f = EmbeddedFile("a/b.txt", b"stale placeholder", str(asset_root))
        assert f.contents() == b"hello"
        assert f.contents_utf8() == "hello"

    def test_missing_file_fails(self, tmp_path: Path) -> None:
        f = EmbeddedFile("gone.txt", b"", str(tmp_path))
        with pytest.raises(EmbeddedFileReadError):
            f.contents()
        with pytest.raises(EmbeddedFileReadError):
            f.contents_utf8()

    def test_equality_resolves_through_cache(
        self, asset_root: Path, content_cache: RuntimeContentCache
    ) -> None:
        left = EmbeddedFile("a/b.txt", b"", str(asset_root), cache=content_cache)
        right = EmbeddedFile("a/b.txt", b"other", str(asset_root), cache=content_cache)

        assert left == right
        assert content_cache.paths() == ["a/b.txt"]

    def test_explicit_cache_is_used(
        self, asset_root: Path, content_cache: RuntimeContentCache
    ) -> None:
        f = EmbeddedFile("a/b.txt", b"", str(asset_root), cache=content_cache)
        f.contents()
        assert "a/b.txt" in content_cache
