from .swagger import (
    DEFAULT_SUBMIT_METHODS,
    DEFAULT_URL,
    Config,
    ConfigDraft,
    DocExpansion,
    ModelRendering,
    RawScript,
    URLsConfig,
)

# --------------------------------------------------------------------------- #

__all__ = [
    "DEFAULT_SUBMIT_METHODS",
    "DEFAULT_URL",
    "Config",
    "ConfigDraft",
    "DocExpansion",
    "ModelRendering",
    "RawScript",
    "URLsConfig",
]
