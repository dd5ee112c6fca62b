"""
Application configuration management.
"""

from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ExportConfig(BaseModel):
    """导出配置"""
    platform: str = Field(default="download", description="保存平台: download/local")
    encoding: str = Field(default="utf-8", description="文本导出编码")
    json_indent: Optional[int] = Field(default=2, description="JSON保存时的缩进")


class ChartConfig(BaseModel):
    """图表配置"""
    template: str = Field(default="plotly_white", description="plotly模板")
    width: Optional[int] = Field(default=None, description="图表宽度（像素）")
    height: Optional[int] = Field(default=None, description="图表高度（像素）")
    include_plotlyjs: str = Field(default="cdn", description="HTML中plotly.js的引入方式")


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field(default="INFO", description="日志级别")
    file_path: Optional[str] = Field(default=None, description="日志文件路径")
    enable_console: bool = Field(default=True, description="启用控制台日志")
    enable_rich: bool = Field(default=True, description="启用彩色格式化")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """验证日志级别"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"不支持的日志级别: {v!r}")
        return level


class AppSettings(BaseModel):
    """应用程序设置"""

    # 下载目录
    exports_dir: str = Field(default="data/exports", description="导出目录")

    # 配置组件
    export: ExportConfig = Field(default_factory=ExportConfig)
    charts: ChartConfig = Field(default_factory=ChartConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or "resources/config/seriesio.json"
        self._settings: Optional[AppSettings] = None
        self._load_settings()

    def _load_settings(self) -> None:
        """加载设置"""
        self._settings = AppSettings()
        logger.debug("Configuration loaded with defaults")

    @property
    def settings(self) -> AppSettings:
        """获取当前设置"""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def load_settings(self, config_file: Optional[str] = None) -> bool:
        """从JSON文件加载设置，文件不存在时保留当前设置"""
        config_path = Path(config_file or self.config_file)
        if not config_path.exists():
            logger.debug(f"Configuration file not found: {config_path}")
            return False

        try:
            self._settings = AppSettings.model_validate_json(
                config_path.read_text(encoding="utf-8")
            )
        except (OSError, ValidationError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return False

        logger.info(f"Configuration loaded from {config_path}")
        self.configure_logging()
        return True

    def configure_logging(self) -> List[int]:
        """按当前日志设置重新配置 loguru 输出"""
        cfg = self.settings.logging
        return setup_logging(
            log_level=cfg.level,
            log_file=cfg.file_path,
            enable_console=cfg.enable_console,
            enable_rich=cfg.enable_rich,
        )

    def save_settings(self, config_file: Optional[str] = None) -> bool:
        """保存设置到文件"""
        try:
            config_path = Path(config_file or self.config_file)
            config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(config_path, 'w', encoding='utf-8') as f:
                f.write(self.settings.model_dump_json(indent=2))

            logger.info(f"Configuration saved to {config_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")
            return False

    def update_setting(self, path: str, value: Any) -> bool:
        """
        更新设置值

        Args:
            path: 设置路径，如 "export.platform" 或 "exports_dir"
            value: 新值

        Returns:
            bool: 是否更新成功
        """
        try:
            parts = path.split('.')
            current = self.settings

            # 导航到父对象
            for part in parts[:-1]:
                current = getattr(current, part)

            if not hasattr(current, parts[-1]):
                raise AttributeError(parts[-1])

            setattr(current, parts[-1], value)

            logger.info(f"Setting updated: {path} = {value}")
            return True
        except AttributeError as e:
            logger.error(f"Failed to update setting {path}: {e}")
            return False

    def get_setting(self, path: str, default: Any = None) -> Any:
        """
        获取设置值

        Args:
            path: 设置路径
            default: 默认值

        Returns:
            设置值或默认值
        """
        try:
            parts = path.split('.')
            current = self.settings

            for part in parts:
                current = getattr(current, part)

            return current
        except (AttributeError, TypeError):
            logger.warning(f"Setting not found: {path}, using default: {default}")
            return default

    def reset_to_defaults(self) -> None:
        """重置为默认设置"""
        self._settings = AppSettings()
        logger.info("Settings reset to defaults")


# 全局配置管理器实例
config_manager = ConfigManager()

# 便捷访问函数
def get_settings() -> AppSettings:
    """获取应用设置"""
    return config_manager.settings

def get_setting(path: str, default: Any = None) -> Any:
    """获取单个设置值"""
    return config_manager.get_setting(path, default)

def update_setting(path: str, value: Any) -> bool:
    """更新单个设置值"""
    return config_manager.update_setting(path, value)

def configure_logging() -> List[int]:
    """按全局设置配置日志"""
    return config_manager.configure_logging()
