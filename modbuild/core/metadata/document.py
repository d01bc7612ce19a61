"""模组元信息文档模型

mod.json 与 mod.hjson 解析后统一成 ModDescriptor: 保持键顺序的字符串键映射，
值为字符串 / 数字 / 布尔 / 列表 / 嵌套映射。
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def _normalize(value: Any) -> Any:
    """把解析器产出的 OrderedDict 等映射统一成普通 dict（保持顺序）"""
    if isinstance(value, Mapping):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v) for v in value]
    return value


class ModDescriptor:
    """模组元信息文档"""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _normalize(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """设置字段；已存在的键保持原位置"""
        self._data[key] = _normalize(value)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModDescriptor):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"ModDescriptor({self._data!r})"

    @property
    def name(self) -> str | None:
        return self._data.get("name")

    def to_dict(self) -> dict[str, Any]:
        return _normalize(self._data)

    def dumps(self) -> str:
        """规范 JSON 输出：4 空格缩进，保留非 ASCII 字符，末尾换行"""
        return json.dumps(self._data, indent=4, ensure_ascii=False) + "\n"
