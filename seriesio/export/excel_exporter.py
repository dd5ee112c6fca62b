"""
Excel导出器 - 将 Series 写入单列工作表
"""

import io
from typing import Any

import pandas as pd

from .base import BaseExporter, SeriesLike, SeriesSnapshot
from ..models.export_options import ExcelOptions
from ..utils.exceptions import TypeMismatchError


class ExcelExporter(BaseExporter):
    """Excel导出器

    生成只有一个工作表的新工作簿：首行为列名，值按索引顺序写在其下，
    不写索引列。导出总是保存文件，从不返回表示。
    """

    options_model = ExcelOptions
    format_name = "Excel"

    def render(self, series: SeriesLike, options=None, **overrides: Any) -> bytes:
        """生成工作簿字节内容"""
        opts = self.resolve(options, **overrides)
        snapshot = SeriesSnapshot.from_series(series)
        frame = snapshot.to_frame()

        # 转换为pandas DataFrame用于Excel导出
        pandas_df = pd.DataFrame({snapshot.name: frame.get_column(snapshot.name).to_list()})

        buffer = io.BytesIO()
        try:
            with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
                pandas_df.to_excel(
                    writer,
                    sheet_name=opts.sheet_name,
                    index=False,
                    header=True,
                )
        except (TypeError, ValueError) as e:
            # openpyxl 拒绝带时区的日期时间、嵌套值等
            raise TypeMismatchError(
                f"列 {snapshot.name!r} 无法写入Excel (dtype={snapshot.dtype})",
                details={"column": snapshot.name, "dtype": snapshot.dtype},
                original_exception=e,
            ) from e

        content = buffer.getvalue()
        self.logger.debug(f"Excel渲染完成: {len(snapshot)} 行, {len(content)} 字节")
        return content

    def encode(self, representation: bytes, options: ExcelOptions) -> bytes:
        return representation

    def should_save(self, options: ExcelOptions) -> bool:
        return True
