"""
图表会话
将 Series 与渲染目标（HTML div id）绑定，按需构建 plotly 图表
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import plotly.graph_objects as go

from ..export.base import SeriesLike, SeriesSnapshot
from ..export.platform import SavePlatform, get_default_platform
from ..utils.config import get_setting
from ..utils.exceptions import ChartGenerationError
from ..utils.logging_config import LoggerMixin


class PlotType(str, Enum):
    """图表类型"""
    LINE = "line"
    BAR = "bar"
    SCATTER = "scatter"
    HISTOGRAM = "hist"
    PIE = "pie"
    BOX = "box"
    VIOLIN = "violin"
    TABLE = "table"


@dataclass
class ChartOptions:
    """图表配置"""
    title: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    template: Optional[str] = None
    x_title: Optional[str] = None
    y_title: Optional[str] = None
    color: Optional[str] = None


class ChartSession(LoggerMixin):
    """图表会话

    创建时只记录 Series 与挂载点，不做校验也不绘图；
    挂载点无效时在 to_html() / save() 时报错。
    """

    def __init__(
        self,
        series: SeriesLike,
        mount_id: str,
        platform: Optional[SavePlatform] = None
    ):
        self.series = series
        self.mount_id = mount_id
        self._platform = platform

    @property
    def platform(self) -> SavePlatform:
        if self._platform is None:
            self._platform = get_default_platform()
        return self._platform

    # ---- 图表构建 ----

    def line(self, options: Optional[ChartOptions] = None) -> go.Figure:
        """折线图：x 为索引标签，y 为值"""
        return self.render(PlotType.LINE, options)

    def bar(self, options: Optional[ChartOptions] = None) -> go.Figure:
        return self.render(PlotType.BAR, options)

    def scatter(self, options: Optional[ChartOptions] = None) -> go.Figure:
        return self.render(PlotType.SCATTER, options)

    def hist(self, options: Optional[ChartOptions] = None) -> go.Figure:
        """直方图：只使用值"""
        return self.render(PlotType.HISTOGRAM, options)

    def pie(self, options: Optional[ChartOptions] = None) -> go.Figure:
        """饼图：索引标签作为扇区名"""
        return self.render(PlotType.PIE, options)

    def box(self, options: Optional[ChartOptions] = None) -> go.Figure:
        return self.render(PlotType.BOX, options)

    def violin(self, options: Optional[ChartOptions] = None) -> go.Figure:
        return self.render(PlotType.VIOLIN, options)

    def table(self, options: Optional[ChartOptions] = None) -> go.Figure:
        """表格：索引标签与值两列"""
        return self.render(PlotType.TABLE, options)

    def render(self, plot_type: PlotType, options: Optional[ChartOptions] = None) -> go.Figure:
        """按类型构建图表

        Args:
            plot_type: 图表类型
            options: 图表配置

        Returns:
            go.Figure: plotly图形对象
        """
        plot_type = PlotType(plot_type)
        options = options or ChartOptions()
        snapshot = SeriesSnapshot.from_series(self.series)

        try:
            trace = self._build_trace(plot_type, snapshot, options)
            figure = go.Figure(data=[trace])
            figure.update_layout(**self._layout(snapshot, options))
        except ValueError as e:
            self.logger.error(f"创建图表失败: {e}")
            raise ChartGenerationError(
                f"创建{plot_type.value}图表失败: {e}",
                details={"plot_type": plot_type.value, "mount_id": self.mount_id},
                original_exception=e,
            ) from e

        self.logger.debug(f"创建图表成功: {plot_type.value}, 挂载点: {self.mount_id}")
        return figure

    def _build_trace(
        self,
        plot_type: PlotType,
        snapshot: SeriesSnapshot,
        options: ChartOptions
    ) -> Any:
        x = list(snapshot.labels)
        y = list(snapshot.values)
        name = snapshot.name
        marker = {"color": options.color} if options.color else None

        if plot_type is PlotType.LINE:
            return go.Scatter(x=x, y=y, mode="lines", name=name, marker=marker)
        if plot_type is PlotType.SCATTER:
            return go.Scatter(x=x, y=y, mode="markers", name=name, marker=marker)
        if plot_type is PlotType.BAR:
            return go.Bar(x=x, y=y, name=name, marker=marker)
        if plot_type is PlotType.HISTOGRAM:
            return go.Histogram(x=y, name=name, marker=marker)
        if plot_type is PlotType.PIE:
            return go.Pie(labels=x, values=y, name=name)
        if plot_type is PlotType.BOX:
            return go.Box(y=y, name=name, marker=marker)
        if plot_type is PlotType.VIOLIN:
            return go.Violin(y=y, name=name, marker=marker)
        return go.Table(
            header={"values": ["", name]},
            cells={"values": [x, y]},
        )

    def _layout(self, snapshot: SeriesSnapshot, options: ChartOptions) -> Dict[str, Any]:
        layout: Dict[str, Any] = {
            "title": {"text": options.title if options.title is not None else snapshot.name},
            "template": options.template or get_setting("charts.template", "plotly_white"),
        }
        width = options.width or get_setting("charts.width")
        height = options.height or get_setting("charts.height")
        if width:
            layout["width"] = width
        if height:
            layout["height"] = height
        if options.x_title:
            layout["xaxis_title"] = options.x_title
        if options.y_title:
            layout["yaxis_title"] = options.y_title
        return layout

    # ---- 输出 ----

    def _check_mount_id(self) -> None:
        if not isinstance(self.mount_id, str) or not self.mount_id.strip():
            raise ChartGenerationError(
                f"无效的挂载点: {self.mount_id!r}",
                details={"mount_id": self.mount_id},
            )

    def to_html(self, figure: go.Figure, full_html: bool = False) -> str:
        """将图表渲染到 id 为挂载点的 div 中"""
        self._check_mount_id()
        return figure.to_html(
            full_html=full_html,
            include_plotlyjs=get_setting("charts.include_plotlyjs", "cdn"),
            div_id=self.mount_id,
        )

    def save(self, figure: go.Figure, file_name: Optional[str] = None) -> Path:
        """保存为独立的HTML页面

        Raises:
            ChartGenerationError: 挂载点无效
            IOFailureError: 写入失败
        """
        html = self.to_html(figure, full_html=True)
        target = self.platform.target_for(None, file_name or f"{self.mount_id}.html")
        destination = self.platform.save(html.encode("utf-8"), target)
        self.logger.info(f"图表导出成功: {destination}")
        return destination

    def available_plots(self) -> List[str]:
        """获取支持的图表类型"""
        return [plot_type.value for plot_type in PlotType]


def plot(series: SeriesLike, mount_id: str, platform: Optional[SavePlatform] = None) -> ChartSession:
    """创建绑定到 series 与挂载点的图表会话"""
    return ChartSession(series, mount_id, platform=platform)
