"""Unit tests for origin address resolution."""

from pathlib import Path

import pytest
from respath.errors import AddressResolutionError
from respath.roots.archive import ArchiveRoot
from respath.roots.base import RootScheme
from respath.roots.plain import PlainTreeRoot
from respath.roots.resolve import archive_origin, plain_tree_origin, resolve_root
from respath.roots.unsupported import UnsupportedRoot


class TestResolvePlainTree:
    """Tests for file: origins."""

    def test_file_uri(self) -> None:
        """A file URI resolves to a plain tree root at its path."""
        root = resolve_root("file:///opt/pkg/payloads")
        assert isinstance(root, PlainTreeRoot)
        assert root.path == Path("/opt/pkg/payloads")

    def test_single_slash_file_uri(self) -> None:
        """The file:/path form without an authority is accepted."""
        root = resolve_root("file:/opt/pkg/payloads")
        assert isinstance(root, PlainTreeRoot)
        assert root.path == Path("/opt/pkg/payloads")

    def test_localhost_authority(self) -> None:
        """file://localhost/ is a local path."""
        root = resolve_root("file://localhost/opt/pkg")
        assert isinstance(root, PlainTreeRoot)
        assert root.path == Path("/opt/pkg")

    def test_percent_decoding(self) -> None:
        """Percent-encoded characters are decoded."""
        root = resolve_root("file:///opt/my%20pkg/payloads")
        assert isinstance(root, PlainTreeRoot)
        assert root.path == Path("/opt/my pkg/payloads")

    def test_scheme_case_insensitive(self) -> None:
        """Scheme matching ignores case."""
        assert isinstance(resolve_root("FILE:///opt/pkg"), PlainTreeRoot)

    def test_remote_host_rejected(self) -> None:
        """A file URI naming a remote host cannot be resolved."""
        with pytest.raises(AddressResolutionError) as exc_info:
            resolve_root("file://fileserver/share/payloads")
        assert exc_info.value.origin == "file://fileserver/share/payloads"

    def test_relative_path_rejected(self) -> None:
        """A file URI with a relative path cannot be resolved."""
        with pytest.raises(AddressResolutionError, match="not absolute"):
            resolve_root("file:relative/payloads")

    def test_empty_path_rejected(self) -> None:
        """A file URI with no path cannot be resolved."""
        with pytest.raises(AddressResolutionError, match="no path"):
            resolve_root("file://")


class TestResolveArchive:
    """Tests for jar: and zip: origins."""

    def test_jar_origin(self) -> None:
        """Text between jar: and ! names the archive, the rest the prefix."""
        root = resolve_root("jar:file:///opt/app.jar!/payloads")
        assert isinstance(root, ArchiveRoot)
        assert root.archive == Path("/opt/app.jar")
        assert root.prefix == "payloads"

    def test_zip_synonym(self) -> None:
        """zip: behaves like jar:."""
        root = resolve_root("zip:file:///opt/app.zip!/payloads")
        assert isinstance(root, ArchiveRoot)
        assert root.archive == Path("/opt/app.zip")

    def test_prefix_without_leading_slash(self) -> None:
        """app.jar!payloads is the same as app.jar!/payloads."""
        root = resolve_root("jar:file:///opt/app.jar!payloads")
        assert isinstance(root, ArchiveRoot)
        assert root.prefix == "payloads"

    def test_archive_root_prefix(self) -> None:
        """A bare !/ points at the archive root."""
        root = resolve_root("jar:file:///opt/app.jar!/")
        assert isinstance(root, ArchiveRoot)
        assert root.prefix == ""

    def test_only_first_separator_splits(self) -> None:
        """Later ! characters belong to the in-archive prefix."""
        root = resolve_root("jar:file:///opt/app.jar!/nested.jar!/payloads")
        assert isinstance(root, ArchiveRoot)
        assert root.archive == Path("/opt/app.jar")
        assert root.prefix == "nested.jar!/payloads"

    def test_bare_archive_path(self) -> None:
        """An archive given as a plain path is accepted."""
        root = resolve_root("jar:/opt/app.jar!/payloads")
        assert isinstance(root, ArchiveRoot)
        assert root.archive == Path("/opt/app.jar")

    def test_missing_separator_rejected(self) -> None:
        """An archive origin without ! cannot be resolved."""
        with pytest.raises(AddressResolutionError, match="separator") as exc_info:
            resolve_root("jar:file:///opt/app.jar")
        assert exc_info.value.origin == "jar:file:///opt/app.jar"

    def test_empty_archive_path_rejected(self) -> None:
        """An archive origin with nothing before ! cannot be resolved."""
        with pytest.raises(AddressResolutionError, match="empty archive path"):
            resolve_root("jar:!/payloads")

    def test_remote_archive_rejected(self) -> None:
        """Archives behind non-file schemes cannot be resolved."""
        with pytest.raises(AddressResolutionError, match="local file"):
            resolve_root("jar:http://example.com/app.jar!/payloads")


class TestResolveUnsupported:
    """Tests for unknown schemes."""

    @pytest.mark.parametrize(
        "origin",
        ["http://example.com/payloads", "vfs:/content/payloads", "no-scheme-at-all"],
    )
    def test_unknown_scheme(self, origin: str) -> None:
        """Unknown schemes resolve to an UnsupportedRoot that lists nothing."""
        root = resolve_root(origin)
        assert isinstance(root, UnsupportedRoot)
        assert root.scheme == RootScheme.UNSUPPORTED
        assert root.location == origin
        assert root.collect() == frozenset()


class TestOriginBuilders:
    """Tests for plain_tree_origin and archive_origin."""

    def test_plain_tree_origin_roundtrip(self, tmp_path: Path) -> None:
        """A built file origin resolves back to the same directory."""
        root = resolve_root(plain_tree_origin(tmp_path / "my payloads"))
        assert isinstance(root, PlainTreeRoot)
        assert root.path == tmp_path / "my payloads"

    def test_archive_origin_format(self, tmp_path: Path) -> None:
        """archive_origin builds a jar: origin with the prefix after !/."""
        origin = archive_origin(tmp_path / "app.jar", "payloads")
        assert origin.startswith("jar:file:")
        assert origin.endswith("app.jar!/payloads")

    def test_archive_origin_roundtrip(self, tmp_path: Path) -> None:
        """A built archive origin resolves back to the same archive and prefix."""
        root = resolve_root(archive_origin(tmp_path / "app.jar", "/payloads/"))
        assert isinstance(root, ArchiveRoot)
        assert root.archive == tmp_path / "app.jar"
        assert root.prefix == "payloads"
