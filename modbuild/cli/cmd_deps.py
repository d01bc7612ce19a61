"""CLI - 依赖坐标命令"""

from __future__ import annotations

import click

from modbuild.cli import _svc
from modbuild.core.dep.models import Coordinate


def register(group: click.Group) -> None:
    group.add_command(deps)


@click.command()
@click.argument("coordinates", nargs=-1)
@click.option("--repos", is_flag=True, help="同时列出 Maven 仓库")
def deps(coordinates: tuple[str, ...], repos: bool) -> None:
    """显示依赖坐标的重定向结果（不指定坐标时使用配置中的 dependencies）"""
    c = _svc()
    requested = (
        [Coordinate.parse(t) for t in coordinates]
        if coordinates else c.requested_dependencies()
    )
    if not requested:
        click.echo("没有配置依赖坐标。")
    for coordinate in requested:
        resolved = c.redirector.redirect(coordinate)
        local = "本地" if c.local_repo.resolve(resolved) else "缺失"
        mark = "->" if resolved != coordinate else "=="
        click.echo(f"  {str(coordinate):50s} {mark} {resolved}  [{local}]")
    if repos:
        click.echo("仓库:")
        for url in c.redirector.repositories():
            click.echo(f"  {url}")
