from .service import GreetingService

__all__ = ["GreetingService"]
