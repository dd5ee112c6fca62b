"""
Logging configuration and setup for the export layer.
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

# 控制台彩色格式
RICH_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
# 控制台纯文本与日志文件格式
PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} | {message}"

LOG_ROTATION = "10 MB"
LOG_RETENTION = "30 days"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    enable_console: bool = True,
    enable_rich: bool = True,
) -> List[int]:
    """
    设置日志配置，替换已有的全部输出

    Args:
        log_level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: 日志文件路径，None表示不写入文件
        enable_console: 是否启用控制台输出
        enable_rich: 是否启用彩色格式化

    Returns:
        新添加的输出 id 列表
    """
    logger.remove()
    handler_ids = []

    if enable_console:
        handler_ids.append(logger.add(
            sys.stderr,
            level=log_level,
            format=RICH_FORMAT if enable_rich else PLAIN_FORMAT,
            colorize=enable_rich,
            backtrace=enable_rich,
            diagnose=enable_rich,
        ))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(logger.add(
            log_path,
            level=log_level,
            format=PLAIN_FORMAT,
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            compression="zip",
            encoding="utf-8",
        ))

    logger.debug(f"日志已配置: level={log_level}, file={log_file}")
    return handler_ids


# 未绑定名称的记录也能使用 {extra[name]} 格式
logger.configure(extra={"name": "seriesio"})


def get_logger(name: str = None) -> "logger":
    """
    获取logger实例

    Args:
        name: logger名称，通常使用模块名或类名

    Returns:
        logger实例
    """
    if name:
        return logger.bind(name=name)
    return logger


class LoggerMixin:
    """
    Logger混入类，为类提供日志功能
    """

    @property
    def logger(self) -> "logger":
        """获取当前类的logger"""
        return get_logger(self.__class__.__name__)
