"""
基础设施容器（InfraContainer）

管理基础设施组件：钉钉机器人客户端等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from infrastructure.notification.dingtalk.robot_client import DingTalkRobot


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 钉钉机器人 ============

    # 机器人客户端（单例，实例只持有不可变配置，可跨线程共享）
    dingtalk_robot = providers.Singleton(
        DingTalkRobot,
        access_token=config.settings.provided.dingtalk_access_token,
        secret=config.settings.provided.dingtalk_secret,
        base_url=config.settings.provided.dingtalk_base_url,
        timeout=config.settings.provided.dingtalk_timeout,
    )
