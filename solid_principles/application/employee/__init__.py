from .handlers import TerminateEmployeeHandler

__all__ = ["TerminateEmployeeHandler"]
