"""构建流水线 - 按固定顺序协调各步骤"""

from __future__ import annotations

import logging

from modbuild.services.container import ServiceContainer
from modbuild.services.pipeline.models import BuildPlan, BuildReport
from modbuild.services.pipeline.steps import BuildSteps

logger = logging.getLogger(__name__)


class BuildPipeline:
    """线性构建流水线，任何一步失败即终止"""

    def __init__(self, container: ServiceContainer | None = None) -> None:
        self.c = container or ServiceContainer()
        self.steps = BuildSteps(self.c)

    def run(self, plan: BuildPlan) -> BuildReport:
        report = BuildReport(plan=plan)

        if plan.compile:
            self.steps.compile(report)
        if plan.needs_meta:
            self.steps.meta(report)
        if plan.needs_jar:
            self.steps.jar(report)
        if plan.lib:
            self.steps.lib(report)
        if plan.sources:
            self.steps.sources(report)
        if plan.dex:
            self.steps.dex(report)
        if plan.install:
            self.steps.install(report)

        logger.info("构建完成: %s", ", ".join(report.executed))
        return report
