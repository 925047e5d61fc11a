"""配置模块"""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from scheduler_extender import __version__


class Settings(BaseSettings):
    """应用配置类"""

    # 应用信息
    APP_NAME: str = "scheduler-extender"
    APP_VERSION: str = __version__
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"  # TRACE, DEBUG, INFO, WARNING, ERROR, ALERT

    # 服务器配置
    HOST: str = "0.0.0.0"
    PORT: int = 80
    API_PREFIX: str = "/scheduler"

    # 打分策略配置
    SCARCE_RESOURCE: str = "intel.com/foo"  # res-pack策略集中放置的稀缺资源
    MAX_PRIORITY: int = 10  # 单个打分策略给出的最高分

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore"  # 允许额外的字段
    )


# 创建全局设置实例
settings = Settings()

# 导出设置
__all__ = ["Settings", "settings"]
