"""
DI 容器

容器层级：ConfigContainer -> InfraContainer -> AppContainer

使用示例：
    from infrastructure.containers import bootstrap

    container = bootstrap()
    handler = container.app.send_message_handler()
"""

from dependency_injector import containers, providers

from infrastructure.containers.application import AppContainer
from infrastructure.containers.config import ConfigContainer
from infrastructure.containers.infrastructure import InfraContainer


class ApplicationContainer(containers.DeclarativeContainer):
    """根容器 - 组合各层容器"""

    config = providers.Container(ConfigContainer)

    infra = providers.Container(InfraContainer, config=config)

    app = providers.Container(AppContainer, infra=infra)


def bootstrap() -> ApplicationContainer:
    """
    创建根容器并初始化日志

    Returns:
        ApplicationContainer 实例
    """
    container = ApplicationContainer()
    container.config.logger()
    return container


__all__ = [
    "ApplicationContainer",
    "ConfigContainer",
    "InfraContainer",
    "AppContainer",
    "bootstrap",
]
