from .errors import register_exception_handlers
from .routes import router

__all__ = ["router", "register_exception_handlers"]
