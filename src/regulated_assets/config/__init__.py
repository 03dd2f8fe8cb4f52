from .settings import HorizonConfig, HttpConfig, LoggingConfig, Settings, load_settings
from .logging_setup import configure_logging

__all__ = [
    'configure_logging',
    'HorizonConfig',
    'HttpConfig',
    'LoggingConfig',
    'Settings',
    'load_settings',
]
