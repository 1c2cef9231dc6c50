from .logging import setup_logging
from .settings import settings

__all__ = [
    "settings",
    "setup_logging",
]
