"""Route group exports."""

from . import circuits, health

__all__ = ["circuits", "health"]
