"""
Utilities Package
"""

from .logger_setup import configure_logging

__all__ = ['configure_logging']
