"""服务容器 - 统一依赖注入

所有服务通过容器获取，同一容器内的实例共享同一份 Config 与命令执行器。

依赖关系图（→ 表示依赖）:
  dexer     → redirector, local_repo, executor
  pipeline  → 其余全部

用法:
    container = ServiceContainer(config=Config.from_file("modbuild.yml"))
    jar = container.packager.package_library()

    # 测试中注入假执行器，d8 不会真正运行
    container = ServiceContainer(config=cfg, executor=FakeExecutor())
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from modbuild.core.dep.models import Coordinate

if TYPE_CHECKING:
    from modbuild.core.config import Config
    from modbuild.core.dep.redirector import DependencyRedirector
    from modbuild.core.dep.resolver import LocalRepository
    from modbuild.core.metadata.resolver import MetadataResolver
    from modbuild.services.installer import ModInstaller
    from modbuild.services.packaging.dexer import D8Dexer
    from modbuild.services.packaging.packager import ArtifactPackager
    from modbuild.utils.shell import CommandExecutor

logger = logging.getLogger(__name__)


class ServiceContainer:
    """懒加载服务容器"""

    def __init__(
        self,
        config: Config | None = None,
        executor: CommandExecutor | None = None,
    ) -> None:
        self._instances: dict[str, object] = {}
        if config is None:
            from modbuild.core.config import get_config
            config = get_config()
        if executor is None:
            from modbuild.utils.shell import get_executor
            executor = get_executor()
        self._config = config
        self._executor = executor

    @property
    def config(self) -> Config:
        return self._config

    @property
    def executor(self) -> CommandExecutor:
        return self._executor

    # ---- 依赖 ----

    @property
    def redirector(self) -> DependencyRedirector:
        if "redirector" not in self._instances:
            from modbuild.core.dep.redirector import DependencyRedirector
            self._instances["redirector"] = DependencyRedirector.from_config(self._config)
        return self._instances["redirector"]  # type: ignore[return-value]

    @property
    def local_repo(self) -> LocalRepository:
        if "local_repo" not in self._instances:
            from modbuild.core.dep.resolver import LocalRepository
            self._instances["local_repo"] = LocalRepository(self._config.maven_local)
        return self._instances["local_repo"]  # type: ignore[return-value]

    def requested_dependencies(self) -> list[Coordinate]:
        return [Coordinate.parse(c) for c in self._config.dependencies]

    # ---- 打包 ----

    @property
    def metadata(self) -> MetadataResolver:
        if "metadata" not in self._instances:
            from modbuild.core.metadata.resolver import MetadataResolver
            self._instances["metadata"] = MetadataResolver(self._config.root)
        return self._instances["metadata"]  # type: ignore[return-value]

    @property
    def packager(self) -> ArtifactPackager:
        if "packager" not in self._instances:
            from modbuild.services.packaging.packager import ArtifactPackager
            self._instances["packager"] = ArtifactPackager(self._config)
        return self._instances["packager"]  # type: ignore[return-value]

    @property
    def dexer(self) -> D8Dexer:
        """d8 的 classpath = 编译 classpath + 运行时 classpath + 本地仓库中的依赖坐标"""
        if "dexer" not in self._instances:
            from modbuild.services.packaging.dexer import D8Dexer
            cfg = self._config
            classpath = [cfg.path(p) for p in (*cfg.compile_classpath, *cfg.runtime_classpath)]
            classpath += self.local_repo.resolve_classpath(
                self.requested_dependencies(), self.redirector,
            )
            self._instances["dexer"] = D8Dexer(
                build_version=cfg.android_build_version,
                sdk_version=cfg.android_sdk_version,
                min_api=cfg.android_min_version,
                classpath=classpath,
                executor=self._executor,
            )
        return self._instances["dexer"]  # type: ignore[return-value]

    @property
    def installer(self) -> ModInstaller:
        if "installer" not in self._instances:
            from modbuild.services.installer import ModInstaller
            if self._config.mods_dir:
                self._instances["installer"] = ModInstaller(self._config.path(self._config.mods_dir))
            else:
                self._instances["installer"] = ModInstaller.for_app(self._config.app_name)
        return self._instances["installer"]  # type: ignore[return-value]


# ---- 全局单例 ----

_global: ServiceContainer | None = None
_global_lock = threading.Lock()


def get_container() -> ServiceContainer:
    """获取全局 ServiceContainer 单例"""
    global _global  # noqa: PLW0603
    if _global is not None:
        return _global
    with _global_lock:
        if _global is None:
            _global = ServiceContainer()
        return _global


def reset_container() -> None:
    """重置全局容器（切换配置后或测试中使用）"""
    global _global  # noqa: PLW0603
    with _global_lock:
        _global = None
