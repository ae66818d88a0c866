"""Geometry, colour and animation logic for a hexagonal-grid 3D LED cube, with in-memory strips and clock."""

__version__ = "0.1.0"
__all__ = ["config", "led", "animations"]