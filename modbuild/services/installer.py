"""本地安装 - 把桌面 jar 复制进游戏的 mods 目录

mods 目录位于游戏的应用数据目录下:
  - Windows: %APPDATA%/<app>
  - macOS:   ~/Library/Application Support/<app>
  - 其他:    $XDG_DATA_HOME/<app>，未设置时 ~/.local/share/<app>

安装前删除与桌面 jar / 跨平台 jar 同名的旧文件，重复执行结果一致。
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from modbuild.core.exceptions import ValidationError
from modbuild.utils.fileio import atomic_copy

logger = logging.getLogger(__name__)


def app_data_dir(
    app_name: str,
    *,
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> Path:
    """解析应用数据目录"""
    env = os.environ if env is None else env
    platform = platform or sys.platform
    if platform.startswith("win"):
        appdata = env.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg_data_home = env.get("XDG_DATA_HOME")
        base = Path(xdg_data_home).expanduser() if xdg_data_home else Path.home() / ".local" / "share"
    return base / app_name


class ModInstaller:
    """mods 目录安装器"""

    def __init__(self, mods_dir: str | Path) -> None:
        self.mods_dir = Path(mods_dir)

    @classmethod
    def for_app(
        cls, app_name: str, *,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> ModInstaller:
        return cls(app_data_dir(app_name, env=env, platform=platform) / "mods")

    def install(self, desktop_jar: str | Path, cross_platform_name: str) -> Path:
        """删除同名旧产物后复制桌面 jar，返回安装后的路径"""
        src = Path(desktop_jar)
        if not src.is_file():
            raise ValidationError(f"桌面 jar 不存在，请先执行 jar: {src}")

        self.mods_dir.mkdir(parents=True, exist_ok=True)
        for name in (src.name, cross_platform_name):
            stale = self.mods_dir / name
            if stale.is_file():
                stale.unlink()
                logger.debug("已删除旧产物: %s", stale)

        dest = atomic_copy(src, self.mods_dir / src.name)

        logger.info("已复制 jar 产物到 %s", self.mods_dir)
        return dest
