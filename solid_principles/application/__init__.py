"""Application layer - strategy holders composed with domain capabilities."""

from .employee.handlers import TerminateEmployeeHandler
from .greeting.service import GreetingService
from .payment.store import Store

__all__ = ["GreetingService", "Store", "TerminateEmployeeHandler"]
