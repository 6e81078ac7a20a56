from .console_client import ConsoleApiError, ConsoleClient

__all__ = ["ConsoleApiError", "ConsoleClient"]
