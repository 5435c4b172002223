from .settings import Settings, settings
from .logging import setup_logging

__all__ = ["Settings", "settings", "setup_logging"]
