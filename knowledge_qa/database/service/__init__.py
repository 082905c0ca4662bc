from .documents import DocumentService

__all__ = ["DocumentService"]
