from .fastapi_setup import FastAPISetup
from .logger import Logger

# --------------------------------------------------------------------------- #

__all__ = ["FastAPISetup", "Logger"]
