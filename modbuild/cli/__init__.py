"""modbuild 命令行接口

CLI 按领域拆分为子模块，每个模块注册自己的命令到 main group。
ModBuildError 统一转换为 click 错误输出，以非零状态退出。
"""

import os
from typing import Any

import click

from modbuild import __version__
from modbuild.core.config import DEFAULT_CONFIG_FILE, init_config
from modbuild.core.exceptions import ModBuildError
from modbuild.services.container import get_container, reset_container
from modbuild.utils.logger import setup_logging


def _svc() -> Any:
    """获取全局服务容器的快捷方式"""
    return get_container()


class _BuildGroup(click.Group):
    """把构建期异常转换为带错误码的 ClickException"""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except ModBuildError as e:
            raise click.ClickException(f"[{e.code}] {e}") from e


@click.group(cls=_BuildGroup)
@click.version_option(version=__version__)
@click.option(
    "--config", "-c", "config_path", default=DEFAULT_CONFIG_FILE,
    show_default=True, help="构建配置文件路径",
)
def main(config_path: str) -> None:
    """modbuild - Mindustry 模组构建与打包工具"""
    setup_logging(
        level=os.getenv("MODBUILD_LOG_LEVEL", "INFO"),
        json_output=os.getenv("MODBUILD_LOG_JSON", "") == "1",
    )
    init_config(config_path)
    reset_container()


# 注册各领域子命令
from modbuild.cli.cmd_build import register as _reg_build  # noqa: E402
from modbuild.cli.cmd_deps import register as _reg_deps  # noqa: E402
from modbuild.cli.cmd_misc import register as _reg_misc  # noqa: E402

_reg_build(main)
_reg_deps(main)
_reg_misc(main)
