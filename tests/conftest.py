import pytest

pytest_plugins = ["path_scaffold.plugin", "pytester"]


@pytest.fixture
def image_file(tmp_path):
    """一个包含全部 256 个字节值的二进制文件，用于验证复制结果逐字节一致"""
    path = tmp_path / "cheez_doing_it_wrong.jpg"
    path.write_bytes(bytes(range(256)) * 4)
    return path


@pytest.fixture
def source_dir(tmp_path):
    """
    用作 dir(source=...) 复制来源的目录：
    - 顶层文件
    - 嵌套目录
    - 二进制文件
    """
    # 结构:
    # data/
    #   ├── README.md
    #   ├── cheez.bin
    #   └── nested/
    #       └── deep/
    #           └── note.txt
    data = tmp_path / "data"
    data.mkdir()
    (data / "README.md").write_text("# Data\n", encoding="utf-8")
    (data / "cheez.bin").write_bytes(b"\x00\xff\x10\x01")

    deep = data / "nested" / "deep"
    deep.mkdir(parents=True)
    (deep / "note.txt").write_text("deep note", encoding="utf-8")

    return data
