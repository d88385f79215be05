"""Discord-facing helpers for sending lookup replies."""

from __future__ import annotations

from .handlers import deliver_reply

__all__ = ["deliver_reply"]
