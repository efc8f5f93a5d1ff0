import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .utils import logger


@dataclass(frozen=True)
class Literal:
    """直接写入的字节内容"""

    data: bytes

    def write_to(self, dest: Path) -> None:
        dest.write_bytes(self.data)


@dataclass(frozen=True)
class CopyFrom:
    """从已有文件复制字节内容"""

    source: Path

    def write_to(self, dest: Path) -> None:
        logger.debug(f"复制文件: {self.source} -> {dest}")
        shutil.copyfile(self.source, dest)


Content = Union[Literal, CopyFrom]


def default_contents(name: str) -> str:
    return f"contents of {name}"


def source_name(value: Any) -> Optional[str]:
    """从路径对象或文件句柄推导文件名"""
    if isinstance(value, os.PathLike):
        return Path(value).name
    name = getattr(value, "name", None)
    if isinstance(name, str) and name:
        return Path(name).name
    return None


def coerce_content(value: Any, name: str) -> Content:
    """
    将调用者传入的内容统一转换为 Literal 或 CopyFrom。

    - None: 默认占位内容 "contents of <name>"
    - str: 原样写入 (UTF-8)
    - bytes / bytearray: 原样写入
    - 路径对象: 复制该文件
    - 可读句柄: 读取其全部内容
    """
    if isinstance(value, (Literal, CopyFrom)):
        return value
    if value is None:
        return Literal(default_contents(name).encode("utf-8"))
    if isinstance(value, str):
        return Literal(value.encode("utf-8"))
    if isinstance(value, (bytes, bytearray)):
        return Literal(bytes(value))
    if isinstance(value, os.PathLike):
        return CopyFrom(Path(value))
    if hasattr(value, "read"):
        data = value.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        return Literal(data)
    raise TypeError(f"不支持的文件内容类型: {type(value).__name__}")
