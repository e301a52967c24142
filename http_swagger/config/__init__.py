from .global_config import GlobalConfig, config
from .logger_config import LoggerConfig
from .swagger_config import SwaggerConfig

# --------------------------------------------------------------------------- #

__all__ = ["GlobalConfig", "LoggerConfig", "SwaggerConfig", "config"]
