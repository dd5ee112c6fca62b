"""
可视化模块
提供绑定 Series 与渲染目标的图表会话
"""

from .chart_session import ChartSession, ChartOptions, PlotType, plot

__all__ = [
    'ChartSession',
    'ChartOptions',
    'PlotType',
    'plot',
]
