"""统一异常体系

所有构建期异常继承 ModBuildError，均为致命错误：不重试、不做部分打包。
CLI 层据此输出友好提示并以非零状态退出。
"""

from __future__ import annotations


class ModBuildError(Exception):
    """构建工具基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(ModBuildError):
    """配置文件缺失或内容无效"""

    code = "CONFIG_ERROR"


class ValidationError(ModBuildError):
    """输入数据校验失败"""

    code = "VALIDATION_ERROR"


# ---- 模组元信息 ----

class MetadataError(ModBuildError):
    """模组元信息 (mod.json / mod.hjson) 相关错误"""

    code = "METADATA_ERROR"


class AmbiguousMetadataError(MetadataError):
    """mod.json 与 mod.hjson 同时存在"""

    code = "AMBIGUOUS_METADATA"


class MissingMetadataError(MetadataError):
    """mod.json 与 mod.hjson 均不存在"""

    code = "MISSING_METADATA"


class MetadataParseError(MetadataError):
    """元信息文件语法错误"""

    code = "METADATA_PARSE_ERROR"


# ---- Android 工具链 ----

class ToolchainError(ModBuildError):
    """Android SDK 工具链错误"""

    code = "TOOLCHAIN_ERROR"


class ToolchainNotFoundError(ToolchainError):
    """ANDROID_SDK_ROOT / ANDROID_HOME 均未设置"""

    code = "TOOLCHAIN_NOT_FOUND"


class ToolchainComponentMissingError(ToolchainError):
    """SDK 根目录下缺少 d8 或 android.jar"""

    code = "TOOLCHAIN_COMPONENT_MISSING"


# ---- 外部工具 ----

class ExternalToolFailureError(ModBuildError):
    """外部工具 (d8 / 编译命令) 以非零状态退出"""

    code = "EXTERNAL_TOOL_FAILURE"

    def __init__(self, message: str, exit_code: int = 1, output: str = "") -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.output = output
