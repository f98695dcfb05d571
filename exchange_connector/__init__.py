"""Market data models, exchange response types, symbol handling and logging for crypto exchanges."""

__version__ = "0.1.0"
__all__ = ["types", "responses", "logger", "symbol"]