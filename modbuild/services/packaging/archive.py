"""jar 归档写入器

所有产物先写入目标目录下的临时文件，归档完整关闭后再 replace 到目标路径，
异常退出时删除临时文件，目标路径上不会出现半截 jar。

条目名冲突时先写入者生效，后续同名条目记 DEBUG 日志后跳过。
"""

from __future__ import annotations

import logging
import shutil
import sys
import zipfile
from contextlib import ExitStack
from pathlib import Path
from types import TracebackType

from modbuild.core.exceptions import ValidationError
from modbuild.utils.fileio import atomic_output

logger = logging.getLogger(__name__)

META_INF = "META-INF"


def list_entries(path: str | Path) -> list[str]:
    """列出归档内所有文件条目（不含目录条目）"""
    with zipfile.ZipFile(path) as zf:
        return [i.filename for i in zf.infolist() if not i.is_dir()]


class ArchiveBuilder:
    """作用域化的 jar 写入器

    用法:
        with ArchiveBuilder(dest) as jar:
            jar.add_tree(classes_dir)
            jar.add_meta_inf(license_file)
    """

    def __init__(self, dest: str | Path) -> None:
        self.dest = Path(dest)
        self._zip: zipfile.ZipFile | None = None
        self._stack = ExitStack()
        self._names: set[str] = set()
        self.skipped: list[str] = []

    def __enter__(self) -> ArchiveBuilder:
        tmp = self._stack.enter_context(atomic_output(self.dest))
        self._zip = zipfile.ZipFile(
            tmp, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False,
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if self._zip is not None:
                self._zip.close()
        except BaseException:
            self._zip = None
            self._stack.__exit__(*sys.exc_info())
            raise
        self._zip = None
        self._stack.__exit__(exc_type, exc, tb)
        if exc_type is None:
            logger.info("归档已写入: %s (%d 个条目)", self.dest, len(self._names))

    @property
    def names(self) -> set[str]:
        return set(self._names)

    def _claim(self, arcname: str) -> bool:
        if arcname in self._names:
            logger.debug("重复条目已跳过: %s -> %s", arcname, self.dest.name)
            self.skipped.append(arcname)
            return False
        self._names.add(arcname)
        return True

    def _writer(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise RuntimeError("ArchiveBuilder 必须在 with 语句中使用")
        return self._zip

    # ---- 写入 ----

    def add_file(self, src: str | Path, arcname: str) -> None:
        arcname = arcname.replace("\\", "/").lstrip("/")
        if self._claim(arcname):
            self._writer().write(src, arcname)

    def add_tree(self, root: str | Path, prefix: str = "") -> int:
        """按相对路径写入目录树中的全部文件，返回写入数量"""
        root = Path(root)
        count = 0
        for path in sorted(p for p in root.rglob("*") if p.is_file()):
            rel = path.relative_to(root).as_posix()
            arcname = f"{prefix.rstrip('/')}/{rel}" if prefix else rel
            before = len(self._names)
            self.add_file(path, arcname)
            count += len(self._names) - before
        return count

    def add_archive(self, src: str | Path) -> int:
        """把另一个归档的内容解包合并进来，返回写入数量"""
        writer = self._writer()
        count = 0
        try:
            zf = zipfile.ZipFile(src)
        except zipfile.BadZipFile as e:
            raise ValidationError(f"不是有效的 jar/zip 归档: {src}: {e}") from e
        with zf:
            for info in zf.infolist():
                if info.is_dir() or not self._claim(info.filename):
                    continue
                target = zipfile.ZipInfo(info.filename, date_time=info.date_time)
                target.compress_type = zipfile.ZIP_DEFLATED
                target.external_attr = info.external_attr
                with zf.open(info) as fin, writer.open(target, "w") as fout:
                    shutil.copyfileobj(fin, fout)
                count += 1
        return count

    def add_path(self, src: str | Path) -> int:
        """目录原样写入，文件视为归档解包合并"""
        src = Path(src)
        if src.is_dir():
            return self.add_tree(src)
        return self.add_archive(src)

    def add_meta_inf(self, src: str | Path) -> None:
        src = Path(src)
        self.add_file(src, f"{META_INF}/{src.name}")
