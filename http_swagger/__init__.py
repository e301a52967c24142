"""Swagger UI configuration for documentation served over HTTP.

Example:
>>> from http_swagger import new_config, options
>>> swagger = new_config(options.url("/openapi.json"), options.deep_linking(False))
>>> swagger.deep_linking
False
"""

from . import options
from .builder import new_config, validate_config
from .errors import InvalidDepthError, InvalidEnumValueError, SwaggerConfigError
from .libs import FastAPISetup
from .models import (
    Config,
    ConfigDraft,
    DocExpansion,
    ModelRendering,
    RawScript,
    URLsConfig,
)
from .options import Option

# --------------------------------------------------------------------------- #

__all__ = [
    "Config",
    "ConfigDraft",
    "DocExpansion",
    "FastAPISetup",
    "InvalidDepthError",
    "InvalidEnumValueError",
    "ModelRendering",
    "Option",
    "RawScript",
    "SwaggerConfigError",
    "URLsConfig",
    "new_config",
    "options",
    "validate_config",
]
