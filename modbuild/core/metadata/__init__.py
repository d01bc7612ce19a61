"""模组元信息模块

拆分说明:
- document.py: ModDescriptor 统一文档模型
- parsers.py: JSON / HJSON 两种语法解析器，按扩展名选择
- resolver.py: 定位唯一元信息文件、注入 name、输出规范 JSON
"""

from modbuild.core.metadata.document import ModDescriptor
from modbuild.core.metadata.parsers import parse_descriptor, parser_for
from modbuild.core.metadata.resolver import MetadataResolver

__all__ = [
    "MetadataResolver",
    "ModDescriptor",
    "parse_descriptor",
    "parser_for",
]
