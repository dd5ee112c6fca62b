"""
Series - 带导出与绘图接口的一维标签数据
"""

from typing import Any, Dict, List, Mapping, Optional, Union

import pandas as pd

from ..export.csv_exporter import CsvExporter
from ..export.excel_exporter import ExcelExporter
from ..export.json_exporter import JsonExporter
from ..export.platform import SavePlatform
from ..models.export_options import CsvOptions, ExcelOptions, JsonOptions
from ..visualization.chart_session import ChartSession


class Series(pd.Series):
    """一维标签数据

    数据引擎为 pandas，本类只增加导出与绘图接口。未命名时列名为 "0"。

    Example:
        >>> s = Series([1, 2, 3, 4])
        >>> s.to_csv()
        '0\\n1\\n2\\n3\\n4'
        >>> s.to_json(format="row")
        [{'0': 1}, {'0': 2}, {'0': 3}, {'0': 4}]
    """

    @property
    def _constructor(self):
        return Series

    @property
    def _constructor_expanddim(self):
        return pd.DataFrame

    def plot(self, mount_id: str) -> ChartSession:
        """创建绑定到挂载点（HTML div id）的图表会话，此时不绘图"""
        return ChartSession(self, mount_id)

    def to_csv(
        self,
        options: Union[CsvOptions, Mapping[str, Any], None] = None,
        *,
        platform: Optional[SavePlatform] = None,
        **kwargs: Any
    ) -> Optional[str]:
        """导出为CSV

        Args:
            options: header / sep / file_name / file_path / download
            platform: 保存平台，默认按配置选择
            **kwargs: 覆盖 options 的同名选项

        Returns:
            CSV字符串；保存文件时返回 None
        """
        return CsvExporter(platform).export(self, options, **kwargs).value

    def to_json(
        self,
        options: Union[JsonOptions, Mapping[str, Any], None] = None,
        *,
        platform: Optional[SavePlatform] = None,
        **kwargs: Any
    ) -> Optional[Union[Dict[str, List[Any]], List[Dict[str, Any]]]]:
        """导出为JSON结构

        Args:
            options: format ("column" | "row") / file_name / file_path / download
            platform: 保存平台，默认按配置选择
            **kwargs: 覆盖 options 的同名选项

        Returns:
            column 格式为字典，row 格式为列表；保存文件时返回 None
        """
        return JsonExporter(platform).export(self, options, **kwargs).value

    def to_excel(
        self,
        options: Union[ExcelOptions, Mapping[str, Any], None] = None,
        *,
        platform: Optional[SavePlatform] = None,
        **kwargs: Any
    ) -> None:
        """写入Excel工作簿

        Args:
            options: sheet_name / file_path（本地平台）/ file_name（下载平台）
            platform: 保存平台，默认按配置选择
            **kwargs: 覆盖 options 的同名选项
        """
        ExcelExporter(platform).export(self, options, **kwargs)
