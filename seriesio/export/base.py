"""
导出器基类与数据快照

每次导出调用都先验证选项，再读取一次 Series 的不可变快照，
导出过程中不会修改原始 Series。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping, Optional, Tuple, Type, Union

import numpy as np
import pandas as pd
import polars as pl

from .platform import SavePlatform, get_default_platform
from ..models.export_options import ExportOptions, resolve_options
from ..models.export_result import ExportResult
from ..utils.logging_config import LoggerMixin
from ..utils.exceptions import TypeMismatchError

# 未命名 Series 的列名
DEFAULT_COLUMN_NAME = "0"

SeriesLike = Union[pd.Series, pl.Series]


def _normalize_value(value: Any) -> Any:
    """缺失值统一为 None，numpy/pandas 标量转换为 Python 标量"""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, pd.Timedelta):
        return value.to_pytimedelta()
    if isinstance(value, np.generic):
        return value.item()
    return value


def _column_name(name: Any) -> str:
    """None 或空名称使用默认列名，其他名称转为字符串"""
    if name is None or name == "":
        return DEFAULT_COLUMN_NAME
    return str(name)


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class SeriesSnapshot:
    """导出时读取的 Series 快照"""
    name: str
    values: Tuple[Any, ...]
    labels: Tuple[Any, ...]
    dtype: str

    @classmethod
    def from_series(cls, series: SeriesLike) -> "SeriesSnapshot":
        if isinstance(series, pl.Series):
            raw = series.to_list()
            name = _column_name(series.name)
            labels = tuple(range(len(raw)))
        elif isinstance(series, pd.Series):
            raw = series.tolist()
            name = _column_name(series.name)
            labels = tuple(_normalize_value(label) for label in series.index.tolist())
        else:
            raise TypeMismatchError(
                f"不支持的数据类型: {type(series).__name__}",
                details={"type": type(series).__name__},
            )

        return cls(
            name=name,
            values=tuple(_normalize_value(v) for v in raw),
            labels=labels,
            dtype=str(series.dtype),
        )

    def __len__(self) -> int:
        return len(self.values)

    def to_frame(self) -> pl.DataFrame:
        """转换为单列 polars DataFrame

        Raises:
            TypeMismatchError: 值的类型不一致，无法构成单一类型的列
        """
        values = list(self.values)
        try:
            column = pl.Series(self.name, values, strict=self._needs_strict(values))
        except (TypeError, ValueError, OverflowError, pl.exceptions.PolarsError) as e:
            raise TypeMismatchError(
                f"列 {self.name!r} 的值无法转换为单一类型 (dtype={self.dtype})",
                details={"column": self.name, "dtype": self.dtype},
                original_exception=e,
            ) from e

        # 空列或全缺失列按字符串列处理
        if column.dtype == pl.Null:
            column = column.cast(pl.String)
        return column.to_frame()

    @staticmethod
    def _needs_strict(values) -> bool:
        """整数与浮点数混合时允许 polars 提升为浮点列，其余情况严格检查"""
        present = [v for v in values if v is not None]
        has_float = any(isinstance(v, float) for v in present)
        return not (has_float and all(_is_numeric(v) for v in present))


def json_default(value: Any) -> Any:
    """json.dumps 的兜底转换：日期时间输出 ISO 格式"""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    raise TypeMismatchError(
        f"无法序列化为JSON的值: {type(value).__name__}",
        details={"type": type(value).__name__},
    )


class BaseExporter(LoggerMixin, ABC):
    """导出器基类

    子类提供 render() 生成表示，export() 决定返回表示还是交给平台保存。
    """

    options_model: Type[ExportOptions] = ExportOptions
    format_name: str = ""

    def __init__(self, platform: Optional[SavePlatform] = None):
        self.platform = platform or get_default_platform()

    def resolve(
        self,
        options: Union[ExportOptions, Mapping[str, Any], None] = None,
        **overrides: Any
    ) -> ExportOptions:
        """验证选项，在读取任何数据之前调用"""
        return resolve_options(self.options_model, options, **overrides)

    @abstractmethod
    def render(self, series: SeriesLike, options=None, **overrides: Any) -> Any:
        """生成导出表示（无副作用）"""

    @abstractmethod
    def encode(self, representation: Any, options: ExportOptions) -> bytes:
        """将表示编码为待保存的字节"""

    def should_save(self, options: ExportOptions) -> bool:
        return bool(options.download or options.file_path)

    def export(self, series: SeriesLike, options=None, **overrides: Any) -> ExportResult:
        """导出 Series

        Args:
            series: 数据源
            options: 选项模型或字典
            **overrides: 覆盖 options 的关键字参数

        Returns:
            ExportResult: 返回的表示，或保存位置
        """
        opts = self.resolve(options, **overrides)
        representation = self.render(series, opts)

        if not self.should_save(opts):
            return ExportResult.returned(representation)

        content = self.encode(representation, opts)
        target = self.platform.target_for(opts.file_path, opts.file_name)
        destination = self.platform.save(content, target)
        self.logger.info(f"{self.format_name}导出成功: {destination}")
        return ExportResult.saved_to(destination)
