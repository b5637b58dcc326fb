"""
Database models for the shortlink service.
"""

from .url import URL

__all__ = ["URL"]
