"""HTTP adapter for the comments API."""

from .backend import HttpCommentBackend

__all__ = ["HttpCommentBackend"]
