"""
应用容器（AppContainer）

管理应用层组件：命令处理器等。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.handlers.notification.send_message_handler import SendMessageHandler


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 命令处理器 ============

    # 发送机器人消息 Handler
    send_message_handler = providers.Factory(
        SendMessageHandler,
        robot=infra.dingtalk_robot,
    )
