"""Email delivery adapter."""

from .sender import MockEmailSender, RealEmailSender

__all__ = ["MockEmailSender", "RealEmailSender"]
