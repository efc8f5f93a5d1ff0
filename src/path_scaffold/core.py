import errno
import os
import shutil
from contextlib import contextmanager
from enum import Enum
from pathlib import Path, PurePath
from typing import Any, Callable, Iterator, List, Optional

from .content import coerce_content, source_name
from .utils import PathLike, caller_prefix, copy_tree, logger, make_root, working_directory


class ScaffoldState(Enum):
    LIVE = "live"
    REMOVED = "removed"


Block = Callable[["Scaffold"], Any]


class Scaffold:
    """
    一个临时目录树及其构建状态。

    所有相对路径操作都以 cursor (当前目录) 为基准；进入 dir 块时 cursor
    与进程工作目录一起切换，退出时恢复。
    """

    def __init__(self, name: Optional[str] = None, base_dir: Optional[PathLike] = None):
        self.name = name or caller_prefix()
        self.root = make_root(self.name, base_dir)
        self.state = ScaffoldState.LIVE
        self._cursor: List[Path] = [self.root]

    def __repr__(self) -> str:
        return f"Scaffold(root={str(self.root)!r}, state={self.state.value})"

    def __enter__(self) -> "Scaffold":
        return self

    def __exit__(self, *exc_info) -> None:
        if self.state is ScaffoldState.LIVE:
            self.remove()

    @property
    def cursor(self) -> Path:
        return self._cursor[-1]

    def _require_cursor(self) -> Path:
        cursor = self.cursor
        if self.state is ScaffoldState.REMOVED or not cursor.is_dir():
            raise FileNotFoundError(errno.ENOENT, "目录不存在", str(cursor))
        return cursor

    @contextmanager
    def _enter(self, path: Path) -> Iterator[Path]:
        self._cursor.append(path)
        try:
            with working_directory(path):
                yield path
        finally:
            self._cursor.pop()

    def run(self, block: Block) -> Any:
        """以根目录为当前目录执行 block(scaffold)"""
        # 根目录已在 cursor 栈底，只切换工作目录
        with working_directory(self._require_cursor()):
            return block(self)

    def file(self, name: Any = None, content: Any = None) -> Path:
        """
        在 cursor 下写入文件并返回其绝对路径。

        name 也可以直接是已打开的文件句柄，此时复制其内容，文件名取其 basename。
        路径对象作为 name 时只表示文件名。
        """
        if content is None and hasattr(name, "read"):
            name, content = source_name(name), name
        if name is None:
            raise TypeError("无法确定文件名")

        cursor = self._require_cursor()
        path = cursor / name
        path.parent.mkdir(parents=True, exist_ok=True)
        coerce_content(content, PurePath(name).as_posix()).write_to(path)
        return path

    def _make_dir(self, name: PathLike, source: Optional[PathLike]) -> Path:
        path = self._require_cursor() / name
        path.mkdir(parents=True, exist_ok=True)
        if source is not None:
            copy_tree(source, path)
        return path

    def dir(self, name: PathLike, block: Optional[Block] = None, *, source: Optional[PathLike] = None) -> Path:
        """
        创建 cursor/name 目录并返回其绝对路径。

        source: 先把该目录下的全部内容复制进来
        block: 以新目录为 cursor 和工作目录执行 block(scaffold)
        """
        path = self._make_dir(name, source)
        if block is not None:
            with self._enter(path):
                block(self)
        return path

    @contextmanager
    def within(self, name: PathLike, *, source: Optional[PathLike] = None) -> Iterator[Path]:
        """dir 块的 with 语句写法"""
        path = self._make_dir(name, source)
        with self._enter(path):
            yield path

    def remove(self) -> None:
        """递归删除整个目录树。重复调用会抛出 FileNotFoundError。"""
        # 工作目录位于树内时先移出，否则恢复前会指向已删除的目录
        cwd = Path(os.getcwd())
        root = self.root.resolve()
        if cwd == root or root in cwd.parents:
            os.chdir(root.parent)
        shutil.rmtree(self.root)
        self.state = ScaffoldState.REMOVED
        logger.debug(f"已删除临时目录: {self.root}")

    def paths(self) -> List[str]:
        """返回根目录下所有文件和目录的相对路径 (POSIX 格式，已排序)"""
        if self.state is ScaffoldState.REMOVED:
            raise FileNotFoundError(errno.ENOENT, "目录不存在", str(self.root))
        return sorted(p.relative_to(self.root).as_posix() for p in self.root.rglob("*"))


def create(
    block: Optional[Block] = None,
    *,
    name: Optional[str] = None,
    base_dir: Optional[PathLike] = None,
) -> Scaffold:
    scaffold = Scaffold(name=name, base_dir=base_dir)
    if block is not None:
        scaffold.run(block)
    return scaffold


def with_scaffold(
    block: Optional[Block] = None,
    *,
    name: Optional[str] = None,
    base_dir: Optional[PathLike] = None,
) -> Path:
    """create 的简化形式，只返回根目录路径 (不会自动删除)"""
    return create(block, name=name, base_dir=base_dir).root
