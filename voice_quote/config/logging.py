import logging
from typing import Optional, Union

from .settings import settings


def setup_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configure root logging for the calculator (defaults to settings.log_level)"""
    logging.basicConfig(
        level=level if level is not None else settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
