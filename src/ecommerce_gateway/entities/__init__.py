"""Domain entities for internal representation.

These are pure dataclasses (frozen) used by the gate and the handlers.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .identity import Identity, Role
from .page_window import PageWindow

__all__ = ["Identity", "PageWindow", "Role"]
