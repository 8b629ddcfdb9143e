"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.notification.services.signature import DEFAULT_WEBHOOK_URL


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 钉钉机器人 ==========
    dingtalk_access_token: str = ""
    dingtalk_secret: str = ""
    dingtalk_base_url: str = DEFAULT_WEBHOOK_URL
    # 请求超时（秒），不设置表示不限制
    dingtalk_timeout: Optional[float] = None

    # ========== 日志配置 ==========
    # debug 为 True 时忽略 log_level，按 DEBUG 输出
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def effective_log_level(self) -> str:
        """实际使用的日志级别"""
        return "DEBUG" if self.debug else self.log_level


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
