"""
导出模块 - 将 Series 导出为多种格式

主要组件:
- csv_exporter: CSV导出器
- json_exporter: JSON导出器
- excel_exporter: Excel导出器
- platform: 保存平台（本地文件 / 下载目录）
"""

from .base import BaseExporter, SeriesSnapshot
from .csv_exporter import CsvExporter
from .json_exporter import JsonExporter
from .excel_exporter import ExcelExporter
from .platform import (
    SavePlatform,
    PlatformKind,
    LocalFilePlatform,
    DownloadPlatform,
    get_default_platform
)

__all__ = [
    'BaseExporter',
    'SeriesSnapshot',
    'CsvExporter',
    'JsonExporter',
    'ExcelExporter',
    'SavePlatform',
    'PlatformKind',
    'LocalFilePlatform',
    'DownloadPlatform',
    'get_default_platform',
]
