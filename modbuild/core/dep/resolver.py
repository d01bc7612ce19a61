"""本地 Maven 仓库解析器

职责:
- 按 Maven 本地仓库布局计算坐标对应的 jar 路径（不触发下载）
- 先重定向再查找，组装 d8 所需的 classpath
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modbuild.core.dep.models import Coordinate
    from modbuild.core.dep.redirector import DependencyRedirector

logger = logging.getLogger(__name__)


class LocalRepository:
    """本地 Maven 仓库 - 仅做本地查找，下载由外部构建系统负责"""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser()

    def artifact_path(self, coordinate: Coordinate) -> Path:
        """<root>/<group 按 . 拆目录>/<name>/<version>/<name>-<version>.jar"""
        return (
            self.root.joinpath(*coordinate.group.split("."))
            / coordinate.name
            / coordinate.version
            / f"{coordinate.name}-{coordinate.version}.jar"
        )

    def resolve(self, coordinate: Coordinate) -> Path | None:
        path = self.artifact_path(coordinate)
        if path.is_file():
            return path
        return None

    def resolve_classpath(
        self,
        coordinates: Iterable[Coordinate],
        redirector: DependencyRedirector,
    ) -> list[Path]:
        """重定向后解析所有坐标，本地缺失的条目告警并跳过"""
        classpath: list[Path] = []
        for coordinate in redirector.redirect_all(coordinates):
            path = self.resolve(coordinate)
            if path is None:
                logger.warning(
                    "本地仓库中不存在 %s: %s",
                    coordinate, self.artifact_path(coordinate),
                )
                continue
            classpath.append(path)
        logger.info("classpath 已解析: %d 项", len(classpath))
        return classpath
