"""依赖坐标重定向

在依赖解析之前按构建开关改写请求的坐标:
  - 开启 Bleeding Edge (mindustry_be) 时，Mindustry 坐标改由 Jitpack 镜像组提供
  - Arc 坐标的版本一律钉死为配置版本，无论开关状态

开关在构造时显式传入，不读取任何全局状态。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from modbuild.core.dep.models import Coordinate
from modbuild.core.exceptions import ConfigError

if TYPE_CHECKING:
    from modbuild.core.config import Config

logger = logging.getLogger(__name__)

MINDUSTRY_GROUP = "com.github.Anuken.Mindustry"
MINDUSTRY_JITPACK_GROUP = "com.github.Anuken.MindustryJitpack"
ARC_GROUP = "com.github.Anuken.Arc"

MAVEN_CENTRAL = "https://repo.maven.apache.org/maven2/"
JITPACK = "https://jitpack.io"
# 正式版 Mindustry / Arc 构建的镜像仓库，Bleeding Edge 构建不使用
RELEASE_MIRROR = "https://raw.githubusercontent.com/Zelaux/MindustryRepo/master/repository"
COMMON_REPOSITORIES = (
    MAVEN_CENTRAL,
    "https://oss.sonatype.org/content/repositories/snapshots/",
    "https://oss.sonatype.org/content/repositories/releases/",
    "https://raw.githubusercontent.com/GlennFolker/EntityAnnoMaven/main",
)


class DependencyRedirector:
    """依赖坐标重定向器"""

    def __init__(
        self,
        use_alternate: bool,
        alternate_version: str,
        pinned_version: str,
        *,
        primary_group: str = MINDUSTRY_GROUP,
        alternate_group: str = MINDUSTRY_JITPACK_GROUP,
        secondary_group: str = ARC_GROUP,
    ) -> None:
        self.use_alternate = use_alternate
        self.alternate_version = alternate_version
        self.pinned_version = pinned_version
        self.primary_group = primary_group
        self.alternate_group = alternate_group
        self.secondary_group = secondary_group

    @classmethod
    def from_config(cls, config: Config) -> DependencyRedirector:
        if config.mindustry_be and not config.mindustry_be_version:
            raise ConfigError("已开启 mindustry_be，但未配置 mindustry_be_version")
        if not config.arc_version:
            raise ConfigError("未配置 arc_version")
        return cls(
            use_alternate=config.mindustry_be,
            alternate_version=config.mindustry_be_version,
            pinned_version=config.arc_version,
        )

    def redirect(self, coordinate: Coordinate) -> Coordinate:
        """返回解析时实际使用的坐标；name 段始终保持不变"""
        if self.use_alternate and coordinate.group == self.primary_group:
            return Coordinate(
                self.alternate_group, coordinate.name, self.alternate_version,
            )
        if coordinate.group == self.secondary_group:
            return coordinate.with_version(self.pinned_version)
        return coordinate

    def redirect_all(self, coordinates: Iterable[Coordinate]) -> list[Coordinate]:
        result = []
        for requested in coordinates:
            resolved = self.redirect(requested)
            if resolved != requested:
                logger.debug("依赖重定向: %s -> %s", requested, resolved)
            result.append(resolved)
        return result

    def repositories(self) -> list[str]:
        return repositories(self.use_alternate)


def repositories(use_alternate: bool) -> list[str]:
    """按开关返回有序的 Maven 仓库列表，jitpack 始终排在最后"""
    repos = list(COMMON_REPOSITORIES)
    if not use_alternate:
        repos.append(RELEASE_MIRROR)
    repos.append(JITPACK)
    return repos
