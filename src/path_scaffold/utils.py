import errno
import inspect
import logging
import os
import shutil
import tempfile
import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union


logger = logging.getLogger("path-scaffold")

PathLike = Union[str, "os.PathLike[str]"]

_PACKAGE_DIR = Path(__file__).resolve().parent


@contextmanager
def working_directory(path: PathLike) -> Iterator[Path]:
    """
    临时切换进程的工作目录，退出时无论是否异常都会恢复。
    注意：工作目录是进程级全局状态，非线程安全。
    原目录在块内被删除时不切换，由外层的 guard 负责恢复。
    """
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        if os.path.isdir(previous):
            os.chdir(previous)


def caller_prefix(default: str = "scaffold") -> str:
    """向上查找第一个不属于本包的调用帧，返回其文件名 (不含扩展名)"""
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = frame.f_code.co_filename
            if not filename.startswith("<"):
                path = Path(filename).resolve()
                if _PACKAGE_DIR not in path.parents:
                    return path.stem
            frame = frame.f_back
    finally:
        # 避免帧引用循环
        del frame
    return default


def make_root(prefix: str, base_dir: Optional[PathLike] = None) -> Path:
    """在临时目录下创建唯一命名的根目录: <prefix>_<秒级时间戳>_<随机串>"""
    base = Path(base_dir) if base_dir is not None else Path(tempfile.gettempdir())
    base = base.absolute()
    while True:
        root = base / f"{prefix}_{int(time.time())}_{uuid.uuid4().hex[:8]}"
        try:
            root.mkdir(parents=True)
        except FileExistsError:
            continue
        logger.debug(f"创建临时根目录: {root}")
        return root


def copy_tree(source: PathLike, dest: Path) -> None:
    """递归复制 source 下的所有内容到 dest (dest 可以已存在)"""
    source = Path(source)
    if not source.exists():
        raise FileNotFoundError(errno.ENOENT, "源目录不存在", str(source))
    logger.debug(f"复制目录内容: {source} -> {dest}")
    shutil.copytree(source, dest, dirs_exist_ok=True)
