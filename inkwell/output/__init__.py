"""Page rendering and props output."""

from .renderer import get_environment, render_page, write_props

__all__ = ["get_environment", "render_page", "write_props"]
