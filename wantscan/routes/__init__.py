"""API routes."""
from . import lookup, session, wants

__all__ = ["lookup", "session", "wants"]
