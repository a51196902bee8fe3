"""
API Client Module

Provides the HTTP client used to fetch remote files.
"""

from .client import RemoteFileClient

__all__ = ["RemoteFileClient"]
