"""
测试配置和工具

提供内存保存平台与配置管理器测试
"""

import json
import shutil
import tempfile
import unittest
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from seriesio.export.platform import (
    DownloadPlatform,
    LocalFilePlatform,
    PlatformKind,
    SavePlatform,
    get_default_platform,
)
from seriesio.utils.config import (
    AppSettings,
    ConfigManager,
    config_manager,
    configure_logging,
    get_setting,
    update_setting,
)
from seriesio.utils.logging_config import get_logger, setup_logging


class InMemoryPlatform(SavePlatform):
    """把保存内容记录在字典中的平台"""

    def __init__(self, kind: PlatformKind = PlatformKind.DOWNLOAD):
        self.kind = kind
        self.saved: Dict[str, bytes] = {}

    def target_for(self, file_path: Optional[str], file_name: Optional[str]) -> str:
        if self.kind is PlatformKind.LOCAL:
            return file_path or file_name
        return file_name or Path(file_path).name

    def save(self, content: bytes, target: str) -> Path:
        self.saved[target] = content
        return Path(target)


class TestConfigManager(unittest.TestCase):
    """配置管理器测试"""

    def setUp(self):
        """创建临时配置文件路径"""
        self.temp_dir = Path(tempfile.mkdtemp(prefix="seriesio_config_"))
        self.config_file = self.temp_dir / "config" / "seriesio.json"
        self.manager = ConfigManager(config_file=str(self.config_file))

    def tearDown(self):
        """清理临时目录"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)
        config_manager.reset_to_defaults()

    def test_defaults(self):
        """测试默认设置"""
        settings = self.manager.settings
        self.assertIsInstance(settings, AppSettings)
        self.assertEqual(settings.export.platform, "download")
        self.assertEqual(settings.export.encoding, "utf-8")
        self.assertEqual(settings.export.json_indent, 2)
        self.assertEqual(settings.charts.template, "plotly_white")

    def test_get_setting_by_path(self):
        """测试点号路径读取"""
        self.assertEqual(self.manager.get_setting("export.platform"), "download")
        self.assertEqual(self.manager.get_setting("export.missing", "fallback"), "fallback")

    def test_update_setting(self):
        """测试更新设置"""
        self.assertTrue(self.manager.update_setting("export.json_indent", 4))
        self.assertEqual(self.manager.get_setting("export.json_indent"), 4)
        self.assertFalse(self.manager.update_setting("export.no_such_key", 1))

    def test_save_and_load(self):
        """测试保存后重新加载"""
        self.manager.update_setting("exports_dir", "somewhere/else")
        self.assertTrue(self.manager.save_settings())
        self.assertTrue(self.config_file.exists())

        saved = json.loads(self.config_file.read_text(encoding="utf-8"))
        self.assertEqual(saved["exports_dir"], "somewhere/else")

        other = ConfigManager(config_file=str(self.config_file))
        self.assertEqual(other.get_setting("exports_dir"), "data/exports")
        self.assertTrue(other.load_settings())
        self.assertEqual(other.get_setting("exports_dir"), "somewhere/else")

    def test_load_missing_file(self):
        """测试加载不存在的文件"""
        self.assertFalse(self.manager.load_settings(str(self.temp_dir / "nope.json")))
        self.assertEqual(self.manager.get_setting("export.platform"), "download")

    def test_load_invalid_file(self):
        """测试加载无效内容时保留原设置"""
        bad_file = self.temp_dir / "bad.json"
        bad_file.write_text('{"export": {"json_indent": "wide"}}', encoding="utf-8")
        self.assertFalse(self.manager.load_settings(str(bad_file)))
        self.assertEqual(self.manager.get_setting("export.json_indent"), 2)

    def test_reset_to_defaults(self):
        """测试重置设置"""
        self.manager.update_setting("export.platform", "local")
        self.manager.reset_to_defaults()
        self.assertEqual(self.manager.get_setting("export.platform"), "download")

    def test_default_platform_follows_setting(self):
        """测试默认平台由 export.platform 决定"""
        self.assertIsInstance(get_default_platform(), DownloadPlatform)

        self.assertTrue(update_setting("export.platform", "local"))
        self.assertEqual(get_setting("export.platform"), "local")
        self.assertIsInstance(get_default_platform(), LocalFilePlatform)


class TestLogging(unittest.TestCase):
    """日志配置测试"""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp(prefix="seriesio_logs_"))

    def tearDown(self):
        setup_logging(enable_console=True, enable_rich=False)
        config_manager.reset_to_defaults()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_export_logged_to_file(self):
        """测试保存成功写入日志文件"""
        from seriesio import Series

        log_file = self.temp_dir / "logs" / "seriesio.log"
        setup_logging(log_level="DEBUG", log_file=str(log_file), enable_console=False)

        Series([1, 2]).to_csv(download=True, platform=InMemoryPlatform())
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        self.assertIn("CSV导出成功: data.csv", content)
        self.assertIn("CsvExporter", content)

    def test_setup_logging_returns_handler_ids(self):
        """测试返回新添加的输出 id"""
        log_file = self.temp_dir / "ids.log"
        self.assertEqual(len(setup_logging(log_file=str(log_file), enable_console=False)), 1)
        self.assertEqual(len(setup_logging(log_file=str(log_file), enable_rich=False)), 2)
        self.assertEqual(setup_logging(enable_console=False), [])

    def test_load_settings_configures_logging(self):
        """测试加载配置文件后按日志设置写入文件"""
        log_file = self.temp_dir / "from_config.log"
        config_file = self.temp_dir / "seriesio.json"
        config_file.write_text(json.dumps({
            "logging": {"level": "debug", "file_path": str(log_file), "enable_console": False},
        }), encoding="utf-8")

        manager = ConfigManager(config_file=str(config_file))
        self.assertTrue(manager.load_settings())
        self.assertEqual(manager.get_setting("logging.level"), "DEBUG")

        get_logger("loaded").debug("来自配置的调试日志")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        self.assertIn("来自配置的调试日志", content)
        self.assertIn("loaded", content)

    def test_invalid_log_level_rejected(self):
        """测试无效日志级别导致加载失败"""
        config_file = self.temp_dir / "bad_level.json"
        config_file.write_text('{"logging": {"level": "loud"}}', encoding="utf-8")
        manager = ConfigManager(config_file=str(config_file))
        self.assertFalse(manager.load_settings())
        self.assertEqual(manager.get_setting("logging.level"), "INFO")

    def test_configure_logging_from_global_settings(self):
        """测试按全局设置配置日志"""
        from seriesio import configure_logging as package_configure_logging

        log_file = self.temp_dir / "global.log"
        update_setting("logging.file_path", str(log_file))
        update_setting("logging.enable_console", False)

        self.assertIs(package_configure_logging, configure_logging)
        self.assertEqual(len(configure_logging()), 1)
        get_logger("global").info("全局日志配置")
        logger.remove()

        self.assertIn("全局日志配置", log_file.read_text(encoding="utf-8"))

    def test_get_logger_binds_name(self):
        """测试 logger 绑定名称"""
        records = []
        logger.remove()
        logger.add(lambda message: records.append(message.record["extra"]["name"]), level="INFO")

        get_logger("custom").info("hello")
        get_logger().info("plain")

        self.assertEqual(records, ["custom", "seriesio"])


if __name__ == '__main__':
    unittest.main()
