"""
钉钉机器人使用示例

演示如何发送消息：
1. 直接使用 DingTalkRobot
2. 通过 DI 容器使用 SendMessageHandler

运行前在 .env 中配置：
    DINGTALK_ACCESS_TOKEN=xxx
    DINGTALK_SECRET=SECxxx

运行：
    python -m examples.send_example
"""

from domain.common.exceptions import NotificationException
from domain.notification.value_objects import (
    markdown_message,
    text_message,
    with_mention_all,
    with_mobiles,
)
from application.commands.notification import SendMessageCommand
from infrastructure.config import get_settings
from infrastructure.containers import bootstrap
from infrastructure.notification.dingtalk import DingTalkRobot


def example_1_robot():
    """示例 1：直接使用机器人客户端"""
    settings = get_settings()
    robot = DingTalkRobot(settings.dingtalk_access_token, settings.dingtalk_secret)

    try:
        robot.build_and_send(text_message("部署完成"), with_mobiles("13800000000"))
        robot.build_and_send(
            markdown_message("日报", "#### 今日完成\n- 修复登录问题"),
            with_mention_all(),
        )
    except NotificationException as e:
        print(f"发送失败: {e.code} {e}")


def example_2_handler():
    """示例 2：通过容器获取 Handler"""
    container = bootstrap()
    handler = container.app.send_message_handler()

    result = handler.handle(
        SendMessageCommand(msgtype="text", content="告警：磁盘使用率 95%", at_all=True)
    )
    print(result)


if __name__ == "__main__":
    example_1_robot()
    example_2_handler()
