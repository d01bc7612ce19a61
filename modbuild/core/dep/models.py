"""依赖坐标数据模型

数据类:
- Coordinate: (group, name, version) 三元组
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from modbuild.core.exceptions import ValidationError


@dataclass(frozen=True)
class Coordinate:
    """单个依赖包坐标，如 com.github.Anuken.Arc:arc-core:v146"""

    group: str
    name: str
    version: str

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """解析 group:name:version 形式的坐标"""
        parts = text.strip().split(":")
        if len(parts) != 3 or not all(parts):
            raise ValidationError(
                f"非法依赖坐标: {text!r}，应为 group:name:version"
            )
        return cls(*parts)

    def with_group(self, group: str) -> Coordinate:
        return replace(self, group=group)

    def with_version(self, version: str) -> Coordinate:
        return replace(self, version=version)

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"
