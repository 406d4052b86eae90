"""Unit tests for SearchPathProvider."""

import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import patch

from respath.providers.search_path import SearchPathProvider
from respath.roots.archive import ArchiveRoot
from respath.roots.plain import PlainTreeRoot
from respath.roots.resolve import archive_origin, plain_tree_origin, resolve_root

MakeTree = Callable[[str, Iterable[str]], Path]
MakeArchive = Callable[[str, Iterable[str]], Path]


class TestSearchPathProvider:
    """Tests for discovery of virtual directories on a search path."""

    def test_finds_directory_root(self, make_tree: MakeTree) -> None:
        """A directory entry containing the name yields a file: origin."""
        site = make_tree("site", ["payloads/linux/lib.so"])
        provider = SearchPathProvider([site])

        assert list(provider.find_roots("payloads")) == [plain_tree_origin(site / "payloads")]

    def test_finds_archive_root(self, make_archive: MakeArchive) -> None:
        """A zip entry with members under name/ yields a jar: origin."""
        archive = make_archive("app.jar", ["payloads/mac/lib.dylib"])
        provider = SearchPathProvider([archive])

        assert list(provider.find_roots("payloads")) == [archive_origin(archive, "payloads")]

    def test_archive_without_directory_member(self, make_archive: MakeArchive) -> None:
        """Archives without explicit directory members still match."""
        archive = make_archive("app.jar", ["payloads/deep/file.bin"])
        origins = list(SearchPathProvider([archive]).find_roots("payloads"))

        root = resolve_root(origins[0])
        assert isinstance(root, ArchiveRoot)
        assert root.prefix == "payloads"

    def test_skips_entries_without_name(
        self, make_tree: MakeTree, make_archive: MakeArchive
    ) -> None:
        """Directories and archives that do not publish the name are skipped."""
        site = make_tree("site", ["other/file.txt"])
        archive = make_archive("app.jar", ["other/file.txt", "payloads-extra/x"])
        provider = SearchPathProvider([site, archive])

        assert list(provider.find_roots("payloads")) == []

    def test_name_that_is_a_file_skipped(self, make_tree: MakeTree) -> None:
        """A plain file named like the virtual directory does not match."""
        site = make_tree("site", ["payloads"])
        assert list(SearchPathProvider([site]).find_roots("payloads")) == []

    def test_skips_missing_and_plain_files(self, tmp_path: Path) -> None:
        """Missing entries and non-archive files are skipped."""
        text = tmp_path / "notes.txt"
        text.write_text("not an archive")
        provider = SearchPathProvider([tmp_path / "missing", text])

        assert list(provider.find_roots("payloads")) == []

    def test_preserves_search_order(
        self, make_tree: MakeTree, make_archive: MakeArchive
    ) -> None:
        """Origins are yielded in search path order."""
        archive = make_archive("app.jar", ["payloads/a"])
        site = make_tree("site", ["payloads/b"])
        provider = SearchPathProvider([archive, site])

        origins = list(provider.find_roots("payloads"))
        assert isinstance(resolve_root(origins[0]), ArchiveRoot)
        assert isinstance(resolve_root(origins[1]), PlainTreeRoot)

    def test_duplicate_entries_visited_once(self, make_tree: MakeTree) -> None:
        """The same entry listed twice yields one origin."""
        site = make_tree("site", ["payloads/a"])
        provider = SearchPathProvider([site, site])

        assert len(list(provider.find_roots("payloads"))) == 1

    def test_defaults_to_sys_path(self, make_tree: MakeTree) -> None:
        """Without explicit entries the provider reads sys.path at lookup time."""
        site = make_tree("site", ["payloads/a"])
        provider = SearchPathProvider()

        with patch.object(sys, "path", [str(site)]):
            origins = list(provider.find_roots("payloads"))

        assert origins == [plain_tree_origin(site / "payloads")]

    def test_empty_sys_path_entry_is_cwd(self) -> None:
        """An empty sys.path entry stands for the current directory."""
        with patch.object(sys, "path", [""]):
            assert SearchPathProvider().entries == (Path("."),)
