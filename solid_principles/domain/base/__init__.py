"""Shared kernel for the domain layer."""

from .entity import Entity

__all__ = ["Entity"]
