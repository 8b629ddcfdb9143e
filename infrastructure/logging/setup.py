"""
日志配置

使用标准 logging，输出带 RFC3339 时间戳的日志到控制台（可选写入文件）。
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
# 本模块安装的 handler 统一使用该名称，重复配置时据此移除
HANDLER_NAME = "dingtalk_notifier"


def configure_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """
    配置日志记录器

    重复调用会替换之前安装的 handler，不会重复输出。

    Args:
        level: 日志级别名（如 "INFO"）
        log_file: 日志文件路径，为空时只输出到控制台
        logger_name: 要配置的记录器名，默认为根记录器

    Returns:
        配置好的 Logger

    Raises:
        ValueError: 日志级别无效
        OSError: 日志文件无法打开
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(logger_name)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger
