"""文件落盘工具

构建产物、生成的 mod.json、配置文件都通过 atomic_output 写出:
先写目标目录下的临时文件，成功后 os.replace 到目标路径，
失败时删除临时文件，目标路径要么是旧内容要么是完整的新内容。
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# 配置文件大小上限 (1MB)
MAX_YAML_SIZE = 1024 * 1024


@contextmanager
def atomic_output(path: str | Path) -> Iterator[Path]:
    """产出一个临时路径，with 块正常结束后替换到 path"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    os.close(fd)
    tmp_path = Path(tmp)
    try:
        yield tmp_path
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def atomic_write(path: str | Path, content: str) -> None:
    """以 UTF-8、LF 换行原子写入文本"""
    with atomic_output(path) as tmp:
        with open(tmp, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)


def atomic_copy(src: str | Path, dest: str | Path) -> Path:
    """原子复制文件，返回目标路径"""
    dest = Path(dest)
    with atomic_output(dest) as tmp:
        shutil.copyfile(src, tmp)
    return dest


def load_yaml(path: str | Path) -> dict[str, Any]:
    """读取 YAML 映射

    文件不存在、为空或顶层不是映射时返回空字典。

    异常:
        yaml.YAMLError: 语法错误
        ValueError: 文件超过 MAX_YAML_SIZE
    """
    p = Path(path)
    if not p.exists():
        return {}

    size = p.stat().st_size
    if size > MAX_YAML_SIZE:
        raise ValueError(f"YAML 文件过大: {p} ({size} 字节), 上限 {MAX_YAML_SIZE} 字节")

    try:
        with open(p, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("YAML 解析失败: %s: %s", p, e)
        raise

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("%s 顶层不是映射 (%s)，按空配置处理", p, type(data).__name__)
        return {}
    return data


def save_yaml(path: str | Path, data: Any) -> None:
    """原子写入 YAML，保持键顺序"""
    atomic_write(path, yaml.safe_dump(data, allow_unicode=True, sort_keys=False))
