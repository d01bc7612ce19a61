"""modbuild - Mindustry 模组构建与打包工具"""

__version__ = "0.1.0"
