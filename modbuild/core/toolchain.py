"""Android SDK 工具链定位

SDK 根目录取 ANDROID_SDK_ROOT / ANDROID_HOME 中第一个非空值，
其下需要:
  - build-tools/<build_version>/d8 (Windows 上为 d8.bat)
  - platforms/android-<sdk_version>/android.jar
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from modbuild.core.exceptions import (
    ToolchainComponentMissingError,
    ToolchainNotFoundError,
)

logger = logging.getLogger(__name__)

SDK_ENV_VARS = ("ANDROID_SDK_ROOT", "ANDROID_HOME")


def is_windows() -> bool:
    return os.name == "nt"


def locate_sdk_root(env: Mapping[str, str] | None = None) -> Path:
    """按优先级读取 SDK 根目录环境变量"""
    env = os.environ if env is None else env
    for var in SDK_ENV_VARS:
        value = env.get(var, "")
        if value:
            logger.debug("Android SDK 根目录: %s=%s", var, value)
            return Path(value).expanduser()
    raise ToolchainNotFoundError(
        f"`{SDK_ENV_VARS[0]}` 与 `{SDK_ENV_VARS[1]}` 均未设置，无法定位 Android SDK"
    )


@dataclass(frozen=True)
class AndroidToolchain:
    """已定位的 Android 工具链"""

    sdk_root: Path
    d8: Path
    android_jar: Path
    windows: bool = False

    @classmethod
    def locate(
        cls,
        build_version: str,
        sdk_version: str,
        *,
        env: Mapping[str, str] | None = None,
        windows: bool | None = None,
    ) -> AndroidToolchain:
        """定位 d8 与 android.jar，缺失时报出对应的 SDK 包名"""
        windows = is_windows() if windows is None else windows
        root = locate_sdk_root(env)

        d8 = root / "build-tools" / build_version / ("d8.bat" if windows else "d8")
        if not d8.exists():
            raise ToolchainComponentMissingError(
                f"Android SDK `build-tools;{build_version}` 未安装或已损坏: 找不到 {d8}"
            )

        android_jar = root / "platforms" / f"android-{sdk_version}" / "android.jar"
        if not android_jar.exists():
            raise ToolchainComponentMissingError(
                f"Android SDK `platforms;android-{sdk_version}` 未安装或已损坏: 找不到 {android_jar}"
            )

        return cls(sdk_root=root, d8=d8, android_jar=android_jar, windows=windows)
