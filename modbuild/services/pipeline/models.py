"""流水线数据模型

数据类：
- BuildPlan: 本次构建需要产出哪些产物
- BuildReport: 各步骤执行记录与产物路径
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class BuildPlan:
    """构建计划 - 选中的步骤会自动带上其前置步骤"""

    compile: bool = True
    jar: bool = True
    lib: bool = False
    sources: bool = False
    dex: bool = False
    install: bool = False

    @classmethod
    def everything(cls, *, dex: bool = True, install: bool = True) -> BuildPlan:
        return cls(jar=True, lib=True, sources=True, dex=dex, install=install)

    @property
    def needs_jar(self) -> bool:
        return self.jar or self.dex or self.install

    @property
    def needs_meta(self) -> bool:
        return self.needs_jar


@dataclass
class BuildReport:
    """流水线执行报告"""

    plan: BuildPlan
    meta_path: Path | None = None
    artifacts: dict[str, Path] = field(default_factory=dict)
    installed: Path | None = None
    steps: list[dict[str, Any]] = field(default_factory=list)

    def record(self, step: str, status: str, **detail: Any) -> None:
        self.steps.append({"step": step, "status": status, **detail})

    @property
    def executed(self) -> list[str]:
        return [s["step"] for s in self.steps if s["status"] == "done"]
