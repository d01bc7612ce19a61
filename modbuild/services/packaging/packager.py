"""产物打包

同一份编译输出派生出四种 jar:
  - <artifact>Desktop.jar       类文件 + 资源 + 运行时依赖 + icon.png + mod.json + META-INF/LICENSE
  - <artifact>.jar              仅类文件 + META-INF/LICENSE（作为纯代码库依赖，不带模组身份）
  - <artifact>-sources.jar      Java 源码 + META-INF/LICENSE
  - <artifact>CrossPlatform.jar 桌面 jar 内容 + d8 生成的 dex jar 内容
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from modbuild.core.exceptions import ValidationError
from modbuild.core.metadata.resolver import JSON_META
from modbuild.services.packaging.archive import ArchiveBuilder

if TYPE_CHECKING:
    from modbuild.core.config import Config
    from modbuild.services.packaging.dexer import D8Dexer

logger = logging.getLogger(__name__)

ICON_FILE = "icon.png"
LICENSE_FILE = "LICENSE"
DEX_JAR = "Dex.jar"


class ArtifactPackager:
    """jar 产物组装器"""

    def __init__(self, config: Config) -> None:
        self.config = config

    @property
    def classes_dir(self) -> Path:
        return self.config.path(self.config.classes_dir)

    @property
    def resources_dir(self) -> Path:
        return self.config.path(self.config.resources_dir)

    @property
    def license_file(self) -> Path:
        return self.config.root / LICENSE_FILE

    @property
    def icon_file(self) -> Path:
        return self.config.root / ICON_FILE

    def output(self, name: str) -> Path:
        return self.config.libs_dir / name

    # ---- 公共输入 ----

    def _require_classes(self) -> Path:
        classes = self.classes_dir
        if not classes.is_dir():
            raise ValidationError(f"编译输出目录不存在，请先编译: {classes}")
        return classes

    def _add_license(self, jar: ArchiveBuilder) -> None:
        if self.license_file.is_file():
            jar.add_meta_inf(self.license_file)
        else:
            logger.warning("未找到 %s，产物中不包含许可证", self.license_file)

    # ---- 产物 ----

    def package_desktop(self, meta_path: str | Path) -> Path:
        """组装桌面 jar，meta_path 为 MetadataResolver 生成的 mod.json"""
        classes = self._require_classes()
        meta_path = Path(meta_path)
        if not meta_path.is_file():
            raise ValidationError(f"模组元信息尚未生成: {meta_path}")

        dest = self.output(self.config.desktop_jar_name)
        with ArchiveBuilder(dest) as jar:
            jar.add_tree(classes)
            if self.resources_dir.is_dir():
                jar.add_tree(self.resources_dir)
            if self.icon_file.is_file():
                jar.add_file(self.icon_file, ICON_FILE)
            else:
                logger.warning("未找到 %s，桌面 jar 中不包含图标", self.icon_file)
            jar.add_file(meta_path, JSON_META)
            self._add_license(jar)

            # 依赖排在最后，模组自身的条目优先
            for entry in self.config.runtime_classpath:
                path = self.config.path(entry)
                if not path.exists():
                    raise ValidationError(f"运行时依赖不存在: {path}")
                count = jar.add_path(path)
                logger.debug("已合并运行时依赖 %s (%d 个条目)", path.name, count)
        return dest

    def package_library(self) -> Path:
        """组装库 jar，只含类文件与许可证"""
        classes = self._require_classes()
        dest = self.output(self.config.library_jar_name)
        with ArchiveBuilder(dest) as jar:
            jar.add_tree(classes)
            self._add_license(jar)
        return dest

    def package_sources(self) -> Path:
        """组装源码 jar"""
        sources = self.config.path(self.config.source_dir)
        if not sources.is_dir():
            raise ValidationError(f"源码目录不存在: {sources}")
        dest = self.output(self.config.sources_jar_name)
        with ArchiveBuilder(dest) as jar:
            jar.add_tree(sources)
            self._add_license(jar)
        return dest

    def package_cross_platform(self, desktop_jar: str | Path, dexer: D8Dexer) -> Path:
        """d8 转换桌面 jar 后与其合并为跨平台 jar

        桌面 jar 已带许可证，不重复添加。
        """
        desktop_jar = Path(desktop_jar)
        if not desktop_jar.is_file():
            raise ValidationError(f"桌面 jar 不存在，请先执行 jar: {desktop_jar}")

        dex_jar = dexer.dex(desktop_jar, self.config.tmp_dir("dex") / DEX_JAR)

        dest = self.output(self.config.cross_platform_jar_name)
        with ArchiveBuilder(dest) as jar:
            jar.add_archive(desktop_jar)
            jar.add_archive(dex_jar)
        return dest
