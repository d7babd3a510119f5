from .datamuse import DatamuseClient

__all__ = ["DatamuseClient"]
