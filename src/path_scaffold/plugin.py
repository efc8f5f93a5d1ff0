"""
pytest 插件。在 conftest.py 中启用:

    pytest_plugins = ["path_scaffold.plugin"]
"""

import pytest

from .core import Scaffold, ScaffoldState, create


def _module_name(request) -> str:
    return request.path.stem


@pytest.fixture
def scaffold(request):
    """以测试模块名命名的临时目录树，测试结束后自动删除"""
    files = Scaffold(name=_module_name(request))
    yield files
    if files.state is ScaffoldState.LIVE:
        files.remove()


@pytest.fixture
def scaffold_factory(request):
    """返回与 create 同签名的工厂函数，测试结束后删除其创建的所有目录树"""
    created = []

    def factory(block=None, **options):
        options.setdefault("name", _module_name(request))
        files = create(block, **options)
        created.append(files)
        return files

    yield factory

    for files in created:
        if files.state is ScaffoldState.LIVE:
            files.remove()
