"""A multi-user TCP chat room server with channels and nicknames."""

__version__ = "0.1.0"
__all__ = ["options", "protocol", "server"]