"""依赖坐标管理模块

拆分说明:
- models.py: 依赖坐标数据模型
- redirector.py: 按构建开关重定向坐标 / 选择 Maven 仓库
- resolver.py: 本地 Maven 仓库查找，组装 classpath
"""

from modbuild.core.dep.models import Coordinate
from modbuild.core.dep.redirector import DependencyRedirector, repositories
from modbuild.core.dep.resolver import LocalRepository

__all__ = [
    "Coordinate",
    "DependencyRedirector",
    "LocalRepository",
    "repositories",
]
