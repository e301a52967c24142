from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggerConfig(BaseSettings):
    """Logger configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="LOGGER_")

    log_level: str = "INFO"
    """Logger level"""
    log_to_file: bool = False
    """Enable logging to file"""
    log_file: str = "logs/http_swagger.log"
    """Logger file path"""
