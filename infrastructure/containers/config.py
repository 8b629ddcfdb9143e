"""
配置容器（ConfigContainer）

提供全局配置和日志初始化。
"""

from dependency_injector import containers, providers

from infrastructure.config.settings import get_settings
from infrastructure.logging.setup import configure_logging


class ConfigContainer(containers.DeclarativeContainer):
    """配置容器 - 管理配置与日志"""

    # 全局配置（单例）
    settings = providers.Singleton(get_settings)

    # 日志初始化（单例，只配置一次）
    logger = providers.Singleton(
        configure_logging,
        level=settings.provided.effective_log_level,
        log_file=settings.provided.log_file,
    )
