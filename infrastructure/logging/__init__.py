"""日志模块"""

from infrastructure.logging.setup import configure_logging

__all__ = ["configure_logging"]
