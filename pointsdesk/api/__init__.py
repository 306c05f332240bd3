from .router import api_router, get_workspace

__all__ = ["api_router", "get_workspace"]
