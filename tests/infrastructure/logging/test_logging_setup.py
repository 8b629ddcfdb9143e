"""Tests for configure_logging"""

import logging

import pytest

from infrastructure.logging.setup import HANDLER_NAME, configure_logging


class TestConfigureLogging:
    """configure_logging 测试"""

    def test_sets_level(self):
        """测试设置日志级别"""
        logger = configure_logging("DEBUG", logger_name="notifier_test_level")

        assert logger.level == logging.DEBUG

    def test_repeated_calls_do_not_duplicate_handlers(self):
        """测试重复调用不会重复添加 handler"""
        configure_logging("INFO", logger_name="notifier_test_repeat")
        logger = configure_logging("INFO", logger_name="notifier_test_repeat")

        assert len(logger.handlers) == 1

    def test_writes_log_file(self, tmp_path):
        """测试写入日志文件"""
        log_file = tmp_path / "logs" / "app.log"
        logger = configure_logging("INFO", str(log_file), logger_name="notifier_test_file")

        logger.info("message was successfully sent")
        for handler in logger.handlers:
            handler.flush()

        assert "message was successfully sent" in log_file.read_text(encoding="utf-8")
        assert len(logger.handlers) == 2

    def test_invalid_level_raises(self):
        """测试无效日志级别抛出异常"""
        with pytest.raises(ValueError):
            configure_logging("LOUD", logger_name="notifier_test_invalid")

    def test_installed_handlers_are_named(self, tmp_path):
        """测试安装的 handler 使用统一名称"""
        log_file = tmp_path / "app.log"
        logger = configure_logging("INFO", str(log_file), logger_name="notifier_test_named")

        assert [h.get_name() for h in logger.handlers] == [HANDLER_NAME, HANDLER_NAME]

    def test_foreign_handlers_are_kept(self):
        """测试重复配置时保留其他来源的 handler"""
        logger = logging.getLogger("notifier_test_foreign")
        foreign = logging.NullHandler()
        logger.addHandler(foreign)
        try:
            configure_logging("INFO", logger_name="notifier_test_foreign")
            configure_logging("INFO", logger_name="notifier_test_foreign")

            assert foreign in logger.handlers
            assert len(logger.handlers) == 2
        finally:
            logger.removeHandler(foreign)
