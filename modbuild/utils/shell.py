"""外部工具调用

d8、javac 以及用户配置的编译命令都经由 run_cmd 启动。
真正启动子进程的是 CommandExecutor，构建服务只依赖这个协议，
测试中换成假执行器即可，不需要机器上装有 JDK 或 Android SDK。
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from dataclasses import dataclass
from typing import Protocol

from modbuild.core.exceptions import ExternalToolFailureError

logger = logging.getLogger(__name__)

# 错误信息只带输出末尾这么多字符，完整输出挂在异常的 output 上
MAX_OUTPUT_IN_MESSAGE = 2000

# 找不到可执行文件时使用的退出码，与 POSIX shell 一致
EXIT_NOT_FOUND = 127


@dataclass
class CommandResult:
    """一次外部工具调用的结果"""

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout 与 stderr 拼接后的输出"""
        if self.stdout and self.stderr:
            return f"{self.stdout.rstrip()}\n{self.stderr}"
        return self.stdout or self.stderr


class CommandExecutor(Protocol):
    """外部工具执行器，execute 阻塞到进程退出为止"""

    def execute(
        self,
        cmd: str | list[str],
        *,
        cwd: str = ".",
        env: dict[str, str] | None = None,
    ) -> CommandResult:
        ...


class LocalExecutor:
    """在本机启动子进程

    字符串命令按 shell 规则切分，但不经过 shell 执行。
    可执行文件不存在时不抛 OSError，而是返回退出码 127，交给 run_cmd 统一报错。
    """

    def execute(
        self,
        cmd: str | list[str],
        *,
        cwd: str = ".",
        env: dict[str, str] | None = None,
    ) -> CommandResult:
        args = shlex.split(cmd) if isinstance(cmd, str) else list(cmd)
        try:
            proc = subprocess.run(
                args, capture_output=True, text=True,
                cwd=cwd, env=env, check=False,
            )
        except FileNotFoundError as e:
            return CommandResult(EXIT_NOT_FOUND, "", f"找不到可执行文件: {e.filename or args[0]}")
        return CommandResult(proc.returncode, proc.stdout, proc.stderr)


_default_executor: CommandExecutor = LocalExecutor()


def get_executor() -> CommandExecutor:
    return _default_executor


def set_executor(executor: CommandExecutor) -> None:
    """替换进程级默认执行器"""
    global _default_executor  # noqa: PLW0603
    _default_executor = executor


def format_command(cmd: str | list[str]) -> str:
    return cmd if isinstance(cmd, str) else shlex.join(cmd)


def run_cmd(
    cmd: str | list[str], *,
    cwd: str = ".",
    env: dict[str, str] | None = None,
    label: str = "cmd",
    executor: CommandExecutor | None = None,
) -> CommandResult:
    """运行外部工具，退出码非零时抛 ExternalToolFailureError

    Args:
        cmd: 参数列表，或按 shell 规则切分的命令字符串
        cwd: 工作目录
        env: 子进程环境变量，None 表示继承当前进程
        label: 工具名，出现在日志和错误信息里
        executor: 不传则用 get_executor() 的默认执行器
    """
    logger.info("  %s: %s (cwd=%s)", label, format_command(cmd), cwd)
    started = time.monotonic()
    r = (executor or get_executor()).execute(cmd, cwd=cwd, env=env)
    elapsed = time.monotonic() - started

    if not r.success:
        output = r.output
        logger.error("  %s 退出码 %d (%.1fs)", label, r.returncode, elapsed)
        raise ExternalToolFailureError(
            f"{label} 执行失败 (exit={r.returncode}): {output[-MAX_OUTPUT_IN_MESSAGE:]}",
            exit_code=r.returncode,
            output=output,
        )
    logger.debug("  %s 完成 (%.1fs)", label, elapsed)
    if r.output:
        logger.debug("  %s 输出:\n%s", label, r.output)
    return r
