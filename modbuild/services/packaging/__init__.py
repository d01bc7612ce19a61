"""打包服务模块

拆分说明:
- archive.py: 作用域化的 jar/zip 写入器
- dexer.py: 调用 Android d8 生成 dex jar
- packager.py: 桌面 / 库 / 源码 / 跨平台四种 jar 的组装
"""

from modbuild.services.packaging.archive import ArchiveBuilder, list_entries
from modbuild.services.packaging.dexer import D8Dexer
from modbuild.services.packaging.packager import ArtifactPackager

__all__ = ["ArchiveBuilder", "ArtifactPackager", "D8Dexer", "list_entries"]
