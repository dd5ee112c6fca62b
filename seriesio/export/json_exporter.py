"""
JSON导出器 - 将 Series 导出为列式或行式结构
"""

import json
from typing import Any, Dict, List, Union

from .base import BaseExporter, SeriesLike, SeriesSnapshot, json_default
from ..models.export_options import JsonFormat, JsonOptions
from ..utils.config import get_setting


class JsonExporter(BaseExporter):
    """JSON导出器

    支持两种结构：
    - column: {列名: [值, ...]}
    - row: [{列名: 值}, ...]，适合逐行导入表格
    索引标签不会输出。
    """

    options_model = JsonOptions
    format_name = "JSON"

    def render(
        self,
        series: SeriesLike,
        options=None,
        **overrides: Any
    ) -> Union[Dict[str, List[Any]], List[Dict[str, Any]]]:
        opts = self.resolve(options, **overrides)
        frame = SeriesSnapshot.from_series(series).to_frame()

        if opts.format is JsonFormat.ROW:
            json_data = frame.to_dicts()
        else:
            json_data = frame.to_dict(as_series=False)

        self.logger.debug(f"JSON渲染完成: {frame.height} 行, format={opts.format.value}")
        return json_data

    def encode(self, representation: Any, options: JsonOptions) -> bytes:
        text = json.dumps(
            representation,
            ensure_ascii=False,
            indent=get_setting("export.json_indent", 2),
            default=json_default,
        )
        return text.encode(get_setting("export.encoding", "utf-8"))
