"""
Package: config
Description: Producer configuration models and environment settings.
"""

from .settings import ProducerConfig, ProducerSettings, get_settings

__all__ = [
    "ProducerConfig",
    "ProducerSettings",
    "get_settings",
]
