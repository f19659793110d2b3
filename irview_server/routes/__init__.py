from .compile import router as compile_router
from .ir_types import router as ir_types_router

__all__ = ["compile_router", "ir_types_router"]
