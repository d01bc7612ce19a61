"""ArchiveBuilder 单元测试"""

from __future__ import annotations

import zipfile

import pytest

from modbuild.services.packaging import ArchiveBuilder, list_entries


class TestArchiveBuilder:
    def test_tree_entries_are_relative_posix(self, tmp_path) -> None:
        tree = tmp_path / "classes"
        (tree / "a" / "b").mkdir(parents=True)
        (tree / "a" / "b" / "C.class").write_bytes(b"1")
        (tree / "D.class").write_bytes(b"2")

        dest = tmp_path / "out.jar"
        with ArchiveBuilder(dest) as jar:
            assert jar.add_tree(tree) == 2
        assert sorted(list_entries(dest)) == ["D.class", "a/b/C.class"]

    def test_archive_contents_merged(self, tmp_path, jar_factory) -> None:
        dep = jar_factory(tmp_path / "dep.jar", {"lib/X.class": b"x", "lib/": b""})
        dest = tmp_path / "out.jar"
        with ArchiveBuilder(dest) as jar:
            jar.add_path(dep)
        assert list_entries(dest) == ["lib/X.class"]
        with zipfile.ZipFile(dest) as zf:
            assert zf.read("lib/X.class") == b"x"

    def test_first_entry_wins(self, tmp_path, jar_factory) -> None:
        first = jar_factory(tmp_path / "a.jar", {"mod.json": b"mine"})
        second = jar_factory(tmp_path / "b.jar", {"mod.json": b"theirs"})
        dest = tmp_path / "out.jar"
        with ArchiveBuilder(dest) as jar:
            jar.add_archive(first)
            assert jar.add_archive(second) == 0
            assert jar.skipped == ["mod.json"]
        with zipfile.ZipFile(dest) as zf:
            assert zf.read("mod.json") == b"mine"

    def test_meta_inf(self, tmp_path) -> None:
        lic = tmp_path / "LICENSE"
        lic.write_text("GPL", encoding="utf-8")
        dest = tmp_path / "out.jar"
        with ArchiveBuilder(dest) as jar:
            jar.add_meta_inf(lic)
        assert list_entries(dest) == ["META-INF/LICENSE"]

    def test_failure_leaves_previous_file_untouched(self, tmp_path) -> None:
        dest = tmp_path / "out.jar"
        dest.write_bytes(b"previous")
        with pytest.raises(FileNotFoundError):
            with ArchiveBuilder(dest) as jar:
                jar.add_file(tmp_path / "missing.class", "missing.class")
        assert dest.read_bytes() == b"previous"
        assert [p.name for p in tmp_path.iterdir()] == ["out.jar"]
