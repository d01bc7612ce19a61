"""构建流水线

步骤顺序（每步只在其输入就绪后执行）:
compile → meta → jar → lib → sources → dex → install
"""

from modbuild.services.pipeline.models import BuildPlan, BuildReport
from modbuild.services.pipeline.pipeline import BuildPipeline

__all__ = ["BuildPipeline", "BuildPlan", "BuildReport"]
