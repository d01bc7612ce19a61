"""CLI - 打包与安装命令"""

from __future__ import annotations

import click

from modbuild.cli import _svc
from modbuild.core.metadata.resolver import JSON_META
from modbuild.services.pipeline import BuildPipeline, BuildPlan, BuildReport

_no_compile = click.option(
    "--no-compile", is_flag=True, help="跳过编译命令，直接使用已有的编译输出",
)


def register(group: click.Group) -> None:
    group.add_command(meta)
    group.add_command(jar)
    group.add_command(lib)
    group.add_command(sources)
    group.add_command(dex)
    group.add_command(install)
    group.add_command(build)


def _run(plan: BuildPlan) -> BuildReport:
    report = BuildPipeline(_svc()).run(plan)
    for name, path in report.artifacts.items():
        click.echo(f"  {name:8s} {path}")
    if report.installed is not None:
        click.echo(f"已安装到: {report.installed}")
    return report


@click.command()
def meta() -> None:
    """生成注入模组名后的 mod.json"""
    c = _svc()
    cfg = c.config
    out = c.metadata.resolve(cfg.mod_name, cfg.tmp_dir("jar") / JSON_META)
    click.echo(str(out))


@click.command()
@_no_compile
def jar(no_compile: bool) -> None:
    """打包桌面 jar (<artifact>Desktop.jar)"""
    _run(BuildPlan(compile=not no_compile))


@click.command()
@_no_compile
def lib(no_compile: bool) -> None:
    """打包库 jar (<artifact>.jar)，仅含类文件"""
    _run(BuildPlan(compile=not no_compile, jar=False, lib=True))


@click.command()
def sources() -> None:
    """打包源码 jar (<artifact>-sources.jar)"""
    _run(BuildPlan(compile=False, jar=False, sources=True))


@click.command()
@_no_compile
def dex(no_compile: bool) -> None:
    """运行 d8 并打包跨平台 jar (<artifact>CrossPlatform.jar)"""
    _run(BuildPlan(compile=not no_compile, dex=True))


@click.command()
@_no_compile
def install(no_compile: bool) -> None:
    """打包桌面 jar 并复制到游戏 mods 目录"""
    _run(BuildPlan(compile=not no_compile, install=True))


@click.command()
@_no_compile
@click.option("--skip-dex", is_flag=True, help="不生成跨平台 jar（无 Android SDK 时使用）")
@click.option("--no-install", is_flag=True, help="不安装到 mods 目录")
def build(no_compile: bool, skip_dex: bool, no_install: bool) -> None:
    """执行完整流水线: compile → meta → jar → lib → sources → dex → install"""
    plan = BuildPlan.everything(dex=not skip_dex, install=not no_install)
    plan.compile = not no_compile
    report = _run(plan)
    click.echo(f"构建完成: {' → '.join(report.executed)}")
