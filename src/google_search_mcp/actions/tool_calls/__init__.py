from .get_tools import get_default_tools

__all__ = ["get_default_tools"]
