from .renderer import IndexRenderer

__all__ = ["IndexRenderer"]
