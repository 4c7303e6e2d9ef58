"""系统配置管理"""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """系统配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    # 图表注册表限制
    max_charts: int = 1000
    chart_ttl_hours: int = 24
    max_pending_calls: int = 500

    # 服务器配置
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = True

    # 日志配置
    log_level: str = "INFO"
    log_file: Path = Path("./logs/chartconf.log")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # 确保日志目录存在
        self.log_file.parent.mkdir(parents=True, exist_ok=True)


# 全局配置实例
settings = Settings()
