"""CLI - 杂项命令（配置初始化、工具链检查）"""

from __future__ import annotations

from pathlib import Path

import click

from modbuild.cli import _svc
from modbuild.core.config import Config
from modbuild.core.toolchain import AndroidToolchain


def register(group: click.Group) -> None:
    group.add_command(init)
    group.add_command(toolchain)


@click.command()
@click.argument("path", default="modbuild.yml")
@click.option("--name", default="", help="模组名（写入 mod_name / mod_artifact）")
@click.option("--force", is_flag=True, help="覆盖已有配置文件")
def init(path: str, name: str, force: bool) -> None:
    """生成默认构建配置文件"""
    target = Path(path)
    if target.exists() and not force:
        raise click.ClickException(f"配置文件已存在: {target}（使用 --force 覆盖）")
    cfg = Config()
    if name:
        cfg.mod_name = name
        cfg.mod_artifact = name.replace(" ", "")
    cfg.save(target)
    click.echo(f"配置已生成: {target}")


@click.command()
def toolchain() -> None:
    """检查 Android SDK 工具链 (d8 / android.jar)"""
    cfg = _svc().config
    tc = AndroidToolchain.locate(cfg.android_build_version, cfg.android_sdk_version)
    click.echo(f"SDK 根目录:  {tc.sdk_root}")
    click.echo(f"d8:          {tc.d8}")
    click.echo(f"android.jar: {tc.android_jar}")
