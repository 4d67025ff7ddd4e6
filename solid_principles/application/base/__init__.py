"""Application base classes."""

from .handlers import BaseHandler

__all__ = ["BaseHandler"]
