"""Persistence implementations."""

from .employee_repository import InMemoryEmployeeRepository, UnimplementedEmployeeRepository

__all__ = ["InMemoryEmployeeRepository", "UnimplementedEmployeeRepository"]
