from .config import DynamoConfig

__all__ = ["DynamoConfig"]
