"""模组元信息解析

项目根目录下 mod.json 与 mod.hjson 必须恰好存在一个:
  - 两者都存在 → AmbiguousMetadataError
  - 两者都不存在 → MissingMetadataError

解析后把 name 字段覆盖为配置的模组名，再以规范 JSON 原子写入临时输出路径，
作为打包步骤的输入。
"""

from __future__ import annotations

import logging
from pathlib import Path

from modbuild.core.exceptions import AmbiguousMetadataError, MissingMetadataError
from modbuild.core.metadata.document import ModDescriptor
from modbuild.core.metadata.parsers import parse_descriptor
from modbuild.utils.fileio import atomic_write

logger = logging.getLogger(__name__)

JSON_META = "mod.json"
HJSON_META = "mod.hjson"


class MetadataResolver:
    """定位并改写模组元信息"""

    def __init__(self, project_dir: str | Path) -> None:
        self.project_dir = Path(project_dir)

    @property
    def json_path(self) -> Path:
        return self.project_dir / JSON_META

    @property
    def hjson_path(self) -> Path:
        return self.project_dir / HJSON_META

    def locate(self) -> Path:
        """返回唯一存在的元信息文件"""
        has_json = self.json_path.is_file()
        has_hjson = self.hjson_path.is_file()
        if has_json and has_hjson:
            raise AmbiguousMetadataError(
                f"模组元信息不明确: `{JSON_META}` 与 `{HJSON_META}` 同时存在 ({self.project_dir})"
            )
        if not has_json and not has_hjson:
            raise MissingMetadataError(
                f"缺少模组元信息: `{JSON_META}` 与 `{HJSON_META}` 均不存在 ({self.project_dir})"
            )
        return self.json_path if has_json else self.hjson_path

    def load(self) -> ModDescriptor:
        return parse_descriptor(self.locate())

    def resolve(self, display_name: str, output_path: str | Path) -> Path:
        """注入 name 并写出规范 JSON，返回输出路径"""
        source = self.locate()
        descriptor = parse_descriptor(source)
        descriptor.set("name", display_name)

        out = Path(output_path)
        atomic_write(out, descriptor.dumps())
        logger.info("模组元信息已生成: %s -> %s (name=%s)", source.name, out, display_name)
        return out
