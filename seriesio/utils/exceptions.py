"""
Custom exception classes for the series export layer.
"""

from typing import Any, Dict, Optional


class SeriesIOError(Exception):
    """Base exception class for all export errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging or API responses."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "original_exception": str(self.original_exception) if self.original_exception else None,
        }


# 配置相关异常
class ConfigurationError(SeriesIOError):
    """配置异常"""
    pass


class InvalidOptionError(ConfigurationError):
    """无效导出选项异常"""
    pass


# 导出相关异常
class ExportError(SeriesIOError):
    """导出异常"""
    pass


class IOFailureError(ExportError):
    """文件写入或下载失败"""
    pass


class TypeMismatchError(ExportError):
    """数据值无法一致地序列化"""
    pass


# 图表相关异常
class ChartGenerationError(SeriesIOError):
    """图表生成异常"""
    pass
