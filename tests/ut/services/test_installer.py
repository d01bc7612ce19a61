"""ModInstaller 单元测试"""

from __future__ import annotations

from pathlib import Path

import pytest

from modbuild.core.exceptions import ValidationError
from modbuild.services.installer import ModInstaller, app_data_dir


class TestAppDataDir:
    def test_windows(self, tmp_path) -> None:
        got = app_data_dir("Mindustry", env={"APPDATA": str(tmp_path)}, platform="win32")
        assert got == tmp_path / "Mindustry"

    def test_macos(self) -> None:
        got = app_data_dir("Mindustry", env={}, platform="darwin")
        assert got == Path.home() / "Library" / "Application Support" / "Mindustry"

    def test_linux_xdg(self, tmp_path) -> None:
        got = app_data_dir("Mindustry", env={"XDG_DATA_HOME": str(tmp_path)}, platform="linux")
        assert got == tmp_path / "Mindustry"

    def test_linux_default(self) -> None:
        got = app_data_dir("Mindustry", env={}, platform="linux")
        assert got == Path.home() / ".local" / "share" / "Mindustry"

    def test_for_app(self, tmp_path) -> None:
        inst = ModInstaller.for_app("Mindustry", env={"XDG_DATA_HOME": str(tmp_path)}, platform="linux")
        assert inst.mods_dir == tmp_path / "Mindustry" / "mods"


class TestInstall:
    @pytest.fixture()
    def desktop(self, tmp_path) -> Path:
        jar = tmp_path / "libs" / "CustomJSONLibDesktop.jar"
        jar.parent.mkdir()
        jar.write_bytes(b"new build")
        return jar

    def test_creates_mods_dir_and_copies(self, tmp_path, desktop) -> None:
        mods = tmp_path / "appdata" / "mods"
        dest = ModInstaller(mods).install(desktop, "CustomJSONLibCrossPlatform.jar")
        assert dest == mods / desktop.name
        assert dest.read_bytes() == b"new build"

    def test_removes_stale_entries(self, tmp_path, desktop) -> None:
        mods = tmp_path / "mods"
        mods.mkdir()
        (mods / "CustomJSONLibDesktop.jar").write_bytes(b"old")
        (mods / "CustomJSONLibCrossPlatform.jar").write_bytes(b"old cross")
        (mods / "SomeOtherMod.jar").write_bytes(b"keep")

        ModInstaller(mods).install(desktop, "CustomJSONLibCrossPlatform.jar")
        assert sorted(p.name for p in mods.iterdir()) == [
            "CustomJSONLibDesktop.jar", "SomeOtherMod.jar",
        ]
        assert (mods / "CustomJSONLibDesktop.jar").read_bytes() == b"new build"

    def test_idempotent(self, tmp_path, desktop) -> None:
        mods = tmp_path / "mods"
        inst = ModInstaller(mods)
        inst.install(desktop, "CustomJSONLibCrossPlatform.jar")
        inst.install(desktop, "CustomJSONLibCrossPlatform.jar")
        assert [p.name for p in mods.iterdir()] == ["CustomJSONLibDesktop.jar"]

    def test_missing_desktop_jar(self, tmp_path) -> None:
        with pytest.raises(ValidationError, match="桌面 jar 不存在"):
            ModInstaller(tmp_path / "mods").install(tmp_path / "none.jar", "x.jar")
        assert not (tmp_path / "mods").exists()
