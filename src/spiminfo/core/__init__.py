"""Core modules for spiminfo."""

from .config import SpimConfig, LayoutConfig, PixelSizeConfig, IndexConfig

__all__ = ["SpimConfig", "LayoutConfig", "PixelSizeConfig", "IndexConfig"]
