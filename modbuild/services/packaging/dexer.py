"""d8 调用封装

命令形式:
    d8 --release --min-api <min> --output <Dex.jar> <Desktop.jar>
       [--classpath <entry>]... --lib <android.jar>

Windows 上 d8 是批处理文件，需要 `cmd /c` 前缀。
工具链在任何子进程启动之前定位，缺失时直接抛错。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from modbuild.core.exceptions import ExternalToolFailureError
from modbuild.core.toolchain import AndroidToolchain
from modbuild.utils.shell import CommandExecutor, run_cmd

logger = logging.getLogger(__name__)


class D8Dexer:
    """把桌面 jar 的字节码转换成 dex jar"""

    def __init__(
        self,
        build_version: str,
        sdk_version: str,
        min_api: str,
        classpath: Sequence[str | Path] = (),
        *,
        executor: CommandExecutor | None = None,
        env: Mapping[str, str] | None = None,
        windows: bool | None = None,
    ) -> None:
        self.build_version = build_version
        self.sdk_version = sdk_version
        self.min_api = min_api
        self.classpath = [Path(p) for p in classpath]
        self.executor = executor
        self.env = env
        self.windows = windows

    def locate_toolchain(self) -> AndroidToolchain:
        return AndroidToolchain.locate(
            self.build_version, self.sdk_version,
            env=self.env, windows=self.windows,
        )

    def build_command(
        self, toolchain: AndroidToolchain, input_jar: Path, output_jar: Path,
    ) -> list[str]:
        command = [
            str(toolchain.d8), "--release",
            "--min-api", self.min_api,
            "--output", str(output_jar),
            str(input_jar),
        ]
        for entry in self.classpath:
            if entry.exists():
                command += ["--classpath", str(entry)]
        command += ["--lib", str(toolchain.android_jar)]
        if toolchain.windows:
            command = ["cmd", "/c", *command]
        return command

    def dex(self, input_jar: str | Path, output_jar: str | Path) -> Path:
        """运行 d8，返回生成的 dex jar 路径"""
        input_jar = Path(input_jar)
        output_jar = Path(output_jar)
        toolchain = self.locate_toolchain()

        output_jar.parent.mkdir(parents=True, exist_ok=True)
        output_jar.unlink(missing_ok=True)

        logger.info("运行 `d8`: %s -> %s", input_jar.name, output_jar)
        run_cmd(
            self.build_command(toolchain, input_jar, output_jar),
            cwd=str(output_jar.parent),
            label="d8",
            executor=self.executor,
        )
        if not output_jar.is_file():
            raise ExternalToolFailureError(
                f"d8 执行成功但未生成输出: {output_jar}", exit_code=0,
            )
        return output_jar
