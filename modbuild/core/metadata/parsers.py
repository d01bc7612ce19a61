"""元信息解析器 - 按扩展名选择解析器

mod.json 与 mod.hjson 都按 HJSON 语法读取（HJSON 是 JSON 的超集），
带注释或无引号键的 mod.json 也能构建，和游戏本身的加载行为一致。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import hjson

from modbuild.core.exceptions import MetadataParseError, ValidationError
from modbuild.core.metadata.document import ModDescriptor

logger = logging.getLogger(__name__)

Parser = Callable[[str], Any]


def _parse_hjson(text: str) -> Any:
    return hjson.loads(text)


_PARSERS: dict[str, Parser] = {
    ".json": _parse_hjson,
    ".hjson": _parse_hjson,
}


def parser_for(path: Path) -> Parser:
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ValidationError(
            f"不支持的元信息格式: {path.name}，可用: {sorted(_PARSERS)}"
        )
    return parser


def parse_descriptor(path: Path) -> ModDescriptor:
    """读取并解析元信息文件

    异常:
        ValidationError: 扩展名不受支持
        MetadataParseError: 不是合法 UTF-8、语法错误或顶层不是对象
    """
    parser = parser_for(path)
    try:
        data = parser(path.read_text(encoding="utf-8"))
    except ValueError as e:
        # UnicodeDecodeError 与 hjson.HjsonDecodeError 均为 ValueError 子类
        raise MetadataParseError(f"{path} 解析失败: {e}") from e
    if not isinstance(data, dict):
        raise MetadataParseError(
            f"{path} 顶层必须是对象，实际为: {type(data).__name__}"
        )
    logger.debug("已解析 %s (%d 个字段)", path.name, len(data))
    return ModDescriptor(data)
