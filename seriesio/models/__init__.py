"""
Data models package
导出选项与导出结果模型
"""

from .export_options import (
    ExportOptions,
    CsvOptions,
    JsonOptions,
    ExcelOptions,
    JsonFormat,
    resolve_options
)
from .export_result import ExportResult, ResultKind

__all__ = [
    'ExportOptions',
    'CsvOptions',
    'JsonOptions',
    'ExcelOptions',
    'JsonFormat',
    'resolve_options',
    'ExportResult',
    'ResultKind',
]
