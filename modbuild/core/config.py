"""集中配置管理

构建参数统一从项目根目录的 modbuild.yml 加载，支持编程式覆盖。
相对路径一律以 project_dir 为基准解析。
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from modbuild.core.exceptions import ConfigError
from modbuild.utils.fileio import load_yaml, save_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "modbuild.yml"


@dataclass
class Config:
    """构建全局配置"""

    # 模组
    mod_name: str = "CustomJSONLib"
    mod_artifact: str = "CustomJSONLib"

    # 目录
    project_dir: str = "."
    build_dir: str = "build"
    source_dir: str = "src"
    classes_dir: str = "build/classes/java/main"
    resources_dir: str = "build/resources/main"

    # 依赖
    runtime_classpath: list[str] = field(default_factory=list)
    compile_classpath: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    maven_local: str = "~/.m2/repository"

    # 版本
    mindustry_be: bool = False
    mindustry_version: str = "v146"
    mindustry_be_version: str = ""
    arc_version: str = "v146"

    # Android
    android_sdk_version: str = "35"
    android_build_version: str = "35.0.0"
    android_min_version: str = "14"

    # 安装 / 编译
    app_name: str = "Mindustry"
    mods_dir: str = ""  # 为空时使用应用数据目录下的 mods
    compile_cmd: str = ""

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.mindustry_be = _strict_bool("mindustry_be", self.mindustry_be)
        for name in ("runtime_classpath", "compile_classpath", "dependencies"):
            value = getattr(self, name)
            if value is None:
                setattr(self, name, [])
            elif not isinstance(value, list):
                raise ConfigError(f"配置项 {name} 必须是列表，实际为: {value!r}")
        # 版本号在 YAML 中可能被解析成数字；空值视为未配置
        for name in (
            "mindustry_version", "mindustry_be_version", "arc_version",
            "android_sdk_version", "android_build_version", "android_min_version",
        ):
            value = getattr(self, name)
            setattr(self, name, "" if value is None else str(value))

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认

        相对的 project_dir（含未设置）以配置文件所在目录为基准。
        """
        try:
            data = load_yaml(path)
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"配置文件无效: {path}: {e}") from e
        known = {f.name for f in fields(cls)}
        matched = {k: v for k, v in data.items() if k in known and k != "extra"}
        extra = {k: v for k, v in data.items() if k not in known}
        base = Path(path).resolve().parent
        project_dir = Path(str(matched.get("project_dir", "."))).expanduser()
        matched["project_dir"] = str(project_dir if project_dir.is_absolute() else base / project_dir)
        cfg = cls(**matched)
        cfg.extra = extra
        if extra:
            logger.debug("未识别的配置项已放入 extra: %s", sorted(extra))
        return cfg

    def save(self, path: str | Path) -> None:
        """保存为 YAML（extra 中的键平铺回顶层）"""
        data = self.to_dict()
        data.update(data.pop("extra") or {})
        save_yaml(path, data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    # ---- 路径解析 ----

    @property
    def root(self) -> Path:
        return Path(self.project_dir).expanduser()

    def path(self, value: str) -> Path:
        """按 project_dir 解析相对路径"""
        p = Path(value).expanduser()
        return p if p.is_absolute() else self.root / p

    @property
    def libs_dir(self) -> Path:
        return self.path(self.build_dir) / "libs"

    def tmp_dir(self, task: str) -> Path:
        """单个构建步骤的临时目录，如 build/tmp/jar"""
        return self.path(self.build_dir) / "tmp" / task

    @property
    def desktop_jar_name(self) -> str:
        return f"{self.mod_artifact}Desktop.jar"

    @property
    def library_jar_name(self) -> str:
        return f"{self.mod_artifact}.jar"

    @property
    def sources_jar_name(self) -> str:
        return f"{self.mod_artifact}-sources.jar"

    @property
    def cross_platform_jar_name(self) -> str:
        return f"{self.mod_artifact}CrossPlatform.jar"


def _strict_bool(name: str, value: Any) -> bool:
    """严格布尔解析，只接受 true/false"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ConfigError(f"配置项 {name} 必须为 true 或 false，实际为: {value!r}")


# 当前配置，首次 import 时不加载文件；由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str | Path = DEFAULT_CONFIG_FILE) -> Config:
    """从文件初始化当前配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current
