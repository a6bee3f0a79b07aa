from .client import LcdClient, LcdError

__all__ = ["LcdClient", "LcdError"]
