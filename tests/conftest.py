"""测试共享 fixture - 临时模组工程 + 假命令执行器

  mod_project()            FakeExecutor
  ┌──────────────────┐     ┌──────────────────────────┐
  │ mod.json / hjson │     │ execute(cmd) 记录调用     │
  │ LICENSE icon.png │     │ 遇到 --output 时写出      │
  │ build/classes/.. │     │ 只含 classes.dex 的 jar   │
  │ modbuild.yml     │     │ returncode 可配置         │
  └──────────────────┘     └──────────────────────────┘
"""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest

import modbuild.core.config as cfgmod
from modbuild.core.config import Config
from modbuild.services.container import reset_container
from modbuild.utils.logger import reset_logging
from modbuild.utils.shell import CommandResult


class FakeExecutor:
    """假命令执行器 - 模拟 d8 / 编译命令，不启动子进程"""

    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[dict] = []

    def execute(self, cmd, *, cwd=".", env=None) -> CommandResult:  # type: ignore[no-untyped-def]
        self.calls.append({"cmd": cmd, "cwd": cwd, "env": env})
        if self.returncode == 0 and isinstance(cmd, list) and "--output" in cmd:
            out = Path(cmd[cmd.index("--output") + 1])
            with zipfile.ZipFile(out, "w") as zf:
                zf.writestr("classes.dex", b"dex\n035\x00")
        return CommandResult(returncode=self.returncode, stdout="", stderr=self.stderr)


def write_jar(path: Path, entries: dict[str, bytes]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return path


def make_sdk(root: Path, build_version: str = "35.0.0", sdk_version: str = "35") -> Path:
    """生成最小 Android SDK 目录结构"""
    d8 = root / "build-tools" / build_version / "d8"
    d8.parent.mkdir(parents=True, exist_ok=True)
    d8.write_text("#!/bin/sh\n", encoding="utf-8")
    android_jar = root / "platforms" / f"android-{sdk_version}" / "android.jar"
    write_jar(android_jar, {"android/app/Activity.class": b"\xca\xfe"})
    return root


@pytest.fixture(autouse=True)
def _isolate_globals():
    """每个用例使用独立的全局配置与容器"""
    cfgmod._current = None
    reset_container()
    yield
    cfgmod._current = None
    reset_container()
    reset_logging()


@pytest.fixture()
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture()
def mod_project(tmp_path: Path) -> Path:
    """带编译输出、资源、图标、许可证与 mod.json 的模组工程"""
    root = tmp_path / "project"
    classes = root / "build" / "classes" / "java" / "main" / "pyguy" / "jsonlib"
    classes.mkdir(parents=True)
    (classes / "JsonLib.class").write_bytes(b"\xca\xfe\xba\xbe")
    (classes / "JsonLibWrapper.class").write_bytes(b"\xca\xfe\xba\xbe")

    resources = root / "build" / "resources" / "main" / "bundles"
    resources.mkdir(parents=True)
    (resources / "bundle.properties").write_text("mod.name=JSON\n", encoding="utf-8")

    src = root / "src" / "pyguy" / "jsonlib"
    src.mkdir(parents=True)
    (src / "JsonLib.java").write_text("package pyguy.jsonlib;\n", encoding="utf-8")

    (root / "LICENSE").write_text("GPL-3.0-or-later\n", encoding="utf-8")
    (root / "icon.png").write_bytes(b"\x89PNG\r\n")
    (root / "mod.json").write_text(json.dumps({
        "name": "placeholder",
        "displayName": "Custom JSON Lib",
        "author": "ThePythonGuy3",
        "version": "1.0",
        "minGameVersion": 146,
        "java": True,
        "hidden": True,
    }, indent=2), encoding="utf-8")
    return root


@pytest.fixture()
def config(mod_project: Path, tmp_path: Path) -> Config:
    return Config(
        mod_name="CustomJSONLib",
        mod_artifact="CustomJSONLib",
        project_dir=str(mod_project),
        mods_dir=str(tmp_path / "appdata" / "Mindustry" / "mods"),
        maven_local=str(tmp_path / "m2"),
    )


@pytest.fixture()
def sdk_root(tmp_path: Path) -> Path:
    return make_sdk(tmp_path / "android-sdk")


@pytest.fixture()
def jar_factory():
    """jar 工厂 fixture: jar_factory(path, {"a/B.class": b"..."})"""
    return write_jar


@pytest.fixture()
def executor_factory():
    """可配置返回码的假执行器工厂"""
    return FakeExecutor
