"""流水线步骤实现

步骤顺序：
1. compile - 运行配置的编译命令（可选）
2. meta - 生成注入 name 后的 mod.json
3. jar - 桌面 jar
4. lib - 库 jar
5. sources - 源码 jar
6. dex - d8 转换并合并为跨平台 jar
7. install - 复制桌面 jar 到 mods 目录

任何步骤抛出的 ModBuildError 都直接向上传播，不做部分成功处理。
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from modbuild.core.exceptions import ValidationError
from modbuild.core.metadata.resolver import JSON_META
from modbuild.utils.shell import run_cmd

if TYPE_CHECKING:
    from modbuild.services.container import ServiceContainer
    from modbuild.services.pipeline.models import BuildReport

logger = logging.getLogger(__name__)


class BuildSteps:
    """构建步骤集合"""

    def __init__(self, container: ServiceContainer) -> None:
        self.c = container

    def compile(self, report: BuildReport) -> None:
        """步骤1: 编译"""
        cmd = self.c.config.compile_cmd
        if not cmd:
            report.record("compile", "skipped", detail="未配置 compile_cmd")
            return
        run_cmd(
            cmd, cwd=str(self.c.config.root), env=dict(os.environ),
            label="compile", executor=self.c.executor,
        )
        report.record("compile", "done", command=cmd)
        logger.info("[Step 1] 编译完成", extra={"step": "compile"})

    def meta(self, report: BuildReport) -> None:
        """步骤2: 生成模组元信息"""
        cfg = self.c.config
        out = self.c.metadata.resolve(cfg.mod_name, cfg.tmp_dir("jar") / JSON_META)
        report.meta_path = out
        report.record("meta", "done", path=str(out))
        logger.info("[Step 2] 元信息已生成: %s", out, extra={"step": "meta"})

    def jar(self, report: BuildReport) -> None:
        """步骤3: 桌面 jar"""
        if report.meta_path is None:
            raise ValidationError("jar 步骤需要先生成模组元信息")
        path = self.c.packager.package_desktop(report.meta_path)
        report.artifacts["jar"] = path
        report.record("jar", "done", path=str(path))
        logger.info("[Step 3] 桌面 jar: %s", path, extra={"step": "jar"})

    def lib(self, report: BuildReport) -> None:
        """步骤4: 库 jar"""
        path = self.c.packager.package_library()
        report.artifacts["lib"] = path
        report.record("lib", "done", path=str(path))
        logger.info("[Step 4] 库 jar: %s", path, extra={"step": "lib"})

    def sources(self, report: BuildReport) -> None:
        """步骤5: 源码 jar"""
        path = self.c.packager.package_sources()
        report.artifacts["sources"] = path
        report.record("sources", "done", path=str(path))
        logger.info("[Step 5] 源码 jar: %s", path, extra={"step": "sources"})

    def dex(self, report: BuildReport) -> None:
        """步骤6: 跨平台 jar"""
        desktop = report.artifacts.get("jar")
        if desktop is None:
            raise ValidationError("dex 步骤需要先生成桌面 jar")
        path = self.c.packager.package_cross_platform(desktop, self.c.dexer)
        report.artifacts["dex"] = path
        report.record("dex", "done", path=str(path))
        logger.info("[Step 6] 跨平台 jar: %s", path, extra={"step": "dex"})

    def install(self, report: BuildReport) -> None:
        """步骤7: 安装到 mods 目录"""
        desktop = report.artifacts.get("jar")
        if desktop is None:
            raise ValidationError("install 步骤需要先生成桌面 jar")
        dest = self.c.installer.install(desktop, self.c.config.cross_platform_jar_name)
        report.installed = dest
        report.record("install", "done", path=str(dest))
        logger.info("[Step 7] 已安装: %s", dest, extra={"step": "install"})
