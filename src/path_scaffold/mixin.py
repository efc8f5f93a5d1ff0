from pathlib import Path
from typing import Any, Optional

from .core import Block, Scaffold, ScaffoldState, create
from .utils import PathLike


class ScaffoldMixin:
    """
    测试类的隐式用法：第一次调用 file/dir 时懒加载创建 scaffold，
    之后在该测试实例的生命周期内始终返回同一个实例。

    block 接收的是 scaffold 而不是测试实例，块内设置的状态不会泄漏到测试实例上。
    """

    _files: Optional[Scaffold] = None

    @property
    def files(self) -> Scaffold:
        if self._files is None:
            self._files = Scaffold(name=type(self).__module__.rsplit(".", 1)[-1])
        return self._files

    def create(self, block: Optional[Block] = None, **options: Any) -> Scaffold:
        options.setdefault("name", type(self).__module__.rsplit(".", 1)[-1])
        self._files = create(block, **options)
        return self._files

    def file(self, name: Any = None, content: Any = None) -> Path:
        return self.files.file(name, content)

    def dir(self, name: PathLike, block: Optional[Block] = None, *, source: Optional[PathLike] = None) -> Path:
        return self.files.dir(name, block, source=source)

    def remove_files(self) -> None:
        if self._files is not None and self._files.state is ScaffoldState.LIVE:
            self._files.remove()
        self._files = None
