"""
Services package.
"""

from .config_svc import ConfigService
from .drift_svc import DriftService

__all__ = [
    "ConfigService",
    "DriftService",
]
