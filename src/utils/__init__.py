"""
Utility modules for the cheque collection and loans API
"""
from .config_loader import AppConfig, load_app_config
from .timestamps import parse_iso, to_iso, utc_now

__all__ = [
    'AppConfig',
    'load_app_config',
    'parse_iso',
    'to_iso',
    'utc_now',
]
