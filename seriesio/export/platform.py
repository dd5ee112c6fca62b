"""
保存平台 - 导出内容的落地方式

导出器本身不关心运行环境，只把字节内容交给注入的平台：
- LocalFilePlatform: 写入本地路径
- DownloadPlatform: 以文件名保存到下载目录
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..utils.logging_config import LoggerMixin
from ..utils.config import get_setting
from ..utils.exceptions import IOFailureError


class PlatformKind(str, Enum):
    """平台类型"""
    LOCAL = "local"
    DOWNLOAD = "download"


class SavePlatform(LoggerMixin, ABC):
    """保存平台接口"""

    kind: PlatformKind

    @abstractmethod
    def target_for(self, file_path: Optional[str], file_name: Optional[str]) -> str:
        """根据导出选项选择保存目标"""

    @abstractmethod
    def save(self, content: bytes, target: str) -> Path:
        """保存内容，返回实际写入的位置

        Raises:
            IOFailureError: 写入失败
        """

    def _write_bytes(self, content: bytes, path: Path) -> Path:
        """单次写入，失败时抛出 IOFailureError"""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            self.logger.error(f"写入失败: {path}: {e}")
            raise IOFailureError(
                f"无法写入文件: {path}",
                details={"path": str(path), "size": len(content)},
                original_exception=e,
            ) from e

        self.logger.debug(f"已写入 {len(content)} 字节: {path}")
        return path


class LocalFilePlatform(SavePlatform):
    """本地文件系统平台"""

    kind = PlatformKind.LOCAL

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def target_for(self, file_path: Optional[str], file_name: Optional[str]) -> str:
        target = file_path or file_name
        if not target:
            raise IOFailureError("未指定写入路径")
        return target

    def save(self, content: bytes, target: str) -> Path:
        path = Path(target)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return self._write_bytes(content, path)


class DownloadPlatform(SavePlatform):
    """下载平台

    相当于浏览器的"另存为"：只使用文件名，内容保存在下载目录中。
    """

    kind = PlatformKind.DOWNLOAD

    def __init__(self, download_dir: Optional[Union[str, Path]] = None):
        self.download_dir = Path(download_dir or get_setting("exports_dir", "data/exports"))

    def target_for(self, file_path: Optional[str], file_name: Optional[str]) -> str:
        if file_name:
            return file_name
        if file_path:
            return Path(file_path).name
        raise IOFailureError("未指定下载文件名")

    def save(self, content: bytes, target: str) -> Path:
        name = Path(target).name
        if not name:
            raise IOFailureError(f"无效的下载文件名: {target!r}")
        return self._write_bytes(content, self.download_dir / name)


def get_default_platform() -> SavePlatform:
    """按配置 export.platform 创建默认平台"""
    kind = get_setting("export.platform", PlatformKind.DOWNLOAD.value)
    if kind == PlatformKind.LOCAL.value:
        return LocalFilePlatform()
    return DownloadPlatform()
