"""集中配置测试"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

import modbuild.core.config as cfgmod
from modbuild.core.config import Config
from modbuild.core.dep import DependencyRedirector
from modbuild.core.exceptions import ConfigError


class TestConfig:
    def test_defaults(self) -> None:
        cfg = Config()
        assert cfg.mindustry_be is False
        assert cfg.desktop_jar_name == "CustomJSONLibDesktop.jar"
        assert cfg.library_jar_name == "CustomJSONLib.jar"
        assert cfg.cross_platform_jar_name == "CustomJSONLibCrossPlatform.jar"

    def test_from_file_missing_returns_defaults(self, tmp_path: Path) -> None:
        cfg = Config.from_file(tmp_path / "nope.yml")
        assert cfg.mod_name == "CustomJSONLib"
        assert Path(cfg.project_dir) == tmp_path.resolve()

    def test_from_file_relative_project_dir(self, tmp_path: Path) -> None:
        (tmp_path / "modbuild.yml").write_text(yaml.dump({
            "mod_name": "My Mod",
            "project_dir": "mod",
            "arc_version": 147,
            "custom_key": "x",
        }), encoding="utf-8")
        cfg = Config.from_file(tmp_path / "modbuild.yml")
        assert cfg.mod_name == "My Mod"
        assert Path(cfg.project_dir) == tmp_path.resolve() / "mod"
        assert cfg.arc_version == "147"
        assert cfg.extra == {"custom_key": "x"}

    def test_null_versions_are_unset(self, tmp_path: Path) -> None:
        p = tmp_path / "modbuild.yml"
        p.write_text("mindustry_be: true\nmindustry_be_version:\narc_version:\n", encoding="utf-8")
        cfg = Config.from_file(p)
        assert cfg.mindustry_be_version == ""
        assert cfg.arc_version == ""
        with pytest.raises(ConfigError, match="mindustry_be_version"):
            DependencyRedirector.from_config(cfg)

    def test_null_arc_version_rejected(self, tmp_path: Path) -> None:
        p = tmp_path / "modbuild.yml"
        p.write_text("arc_version:\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="arc_version"):
            DependencyRedirector.from_config(Config.from_file(p))

    @pytest.mark.parametrize(("raw", "expected"), [(True, True), ("false", False), ("TRUE", True)])
    def test_strict_bool(self, raw, expected) -> None:
        assert Config(mindustry_be=raw).mindustry_be is expected

    @pytest.mark.parametrize("raw", ["yes", 1, None])
    def test_strict_bool_rejects(self, raw) -> None:
        with pytest.raises(ConfigError, match="mindustry_be"):
            Config(mindustry_be=raw)

    def test_list_fields_validated(self) -> None:
        with pytest.raises(ConfigError, match="runtime_classpath"):
            Config(runtime_classpath="libs/a.jar")  # type: ignore[arg-type]

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        p = tmp_path / "modbuild.yml"
        p.write_text("mod_name: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="配置文件无效"):
            Config.from_file(p)

    def test_save_and_reload(self, tmp_path: Path) -> None:
        cfg = Config(mod_name="Saved", mindustry_be=True, mindustry_be_version="abc")
        cfg.extra = {"note": "kept"}
        cfg.save(tmp_path / "modbuild.yml")
        again = Config.from_file(tmp_path / "modbuild.yml")
        assert again.mod_name == "Saved"
        assert again.mindustry_be is True
        assert again.extra == {"note": "kept"}

    def test_path_resolution(self, tmp_path: Path) -> None:
        cfg = Config(project_dir=str(tmp_path))
        assert cfg.path("build/x") == tmp_path / "build" / "x"
        assert cfg.path(str(tmp_path / "abs")) == tmp_path / "abs"
        assert cfg.libs_dir == tmp_path / "build" / "libs"
        assert cfg.tmp_dir("dex") == tmp_path / "build" / "tmp" / "dex"


class TestGlobalConfig:
    def test_init_config(self, tmp_path: Path) -> None:
        (tmp_path / "modbuild.yml").write_text("mod_name: Loaded\n", encoding="utf-8")
        cfgmod.init_config(tmp_path / "modbuild.yml")
        assert cfgmod.get_config().mod_name == "Loaded"
