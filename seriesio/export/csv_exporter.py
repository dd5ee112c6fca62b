"""
CSV导出器 - 将 Series 导出为分隔文本
"""

from typing import Any

import polars as pl

from .base import BaseExporter, SeriesLike, SeriesSnapshot
from ..models.export_options import CsvOptions
from ..utils.config import get_setting
from ..utils.exceptions import TypeMismatchError


class CsvExporter(BaseExporter):
    """CSV导出器

    每个值占一行，按索引顺序输出；header 为 True 时首行为列名。
    缺失值写为空字段，含分隔符、引号或换行的字段由 polars 加引号。
    """

    options_model = CsvOptions
    format_name = "CSV"

    def render(self, series: SeriesLike, options=None, **overrides: Any) -> str:
        opts = self.resolve(options, **overrides)
        snapshot = SeriesSnapshot.from_series(series)
        frame = snapshot.to_frame()

        try:
            text = frame.write_csv(
                separator=opts.sep,
                include_header=opts.header,
                line_terminator="\n",
                null_value="",
            )
        except pl.exceptions.PolarsError as e:
            raise TypeMismatchError(
                f"列 {snapshot.name!r} 无法写为CSV (dtype={frame.dtypes[0]})",
                details={"column": snapshot.name, "dtype": str(frame.dtypes[0])},
                original_exception=e,
            ) from e

        # 去掉末尾换行
        if text.endswith("\n"):
            text = text[:-1]

        self.logger.debug(f"CSV渲染完成: {len(snapshot)} 行, header={opts.header}")
        return text

    def encode(self, representation: str, options: CsvOptions) -> bytes:
        return representation.encode(get_setting("export.encoding", "utf-8"))
