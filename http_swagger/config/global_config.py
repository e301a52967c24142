from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger_config import LoggerConfig
from .swagger_config import SwaggerConfig


class GlobalConfig(BaseSettings):
    """Global configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False)

    logger: LoggerConfig = LoggerConfig()
    """Logger configuration settings"""
    swagger: SwaggerConfig = SwaggerConfig()
    """Swagger UI configuration settings"""


# --------------------------------------------------------------------------- #

config = GlobalConfig()
"""Global configuration instance

This instance is used to access the global configuration settings.

Example:
>>> from http_swagger.config import config
>>> print(config.swagger.default_instance_name)
swagger
"""
