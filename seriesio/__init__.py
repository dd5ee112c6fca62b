"""
seriesio - Series 的 CSV / JSON / Excel 导出与图表绑定
"""

from .core import Series
from .export import (
    CsvExporter,
    JsonExporter,
    ExcelExporter,
    SavePlatform,
    LocalFilePlatform,
    DownloadPlatform,
)
from .models import CsvOptions, JsonOptions, ExcelOptions, JsonFormat, ExportResult, ResultKind
from .visualization import ChartSession, ChartOptions, PlotType
from .utils.config import configure_logging
from .utils.exceptions import (
    SeriesIOError,
    InvalidOptionError,
    IOFailureError,
    TypeMismatchError,
    ChartGenerationError,
)

__version__ = "0.1.0"

__all__ = [
    'Series',
    'CsvExporter',
    'JsonExporter',
    'ExcelExporter',
    'SavePlatform',
    'LocalFilePlatform',
    'DownloadPlatform',
    'CsvOptions',
    'JsonOptions',
    'ExcelOptions',
    'JsonFormat',
    'ExportResult',
    'ResultKind',
    'ChartSession',
    'ChartOptions',
    'PlotType',
    'configure_logging',
    'SeriesIOError',
    'InvalidOptionError',
    'IOFailureError',
    'TypeMismatchError',
    'ChartGenerationError',
]
