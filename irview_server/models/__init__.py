from .schemas import (
    CompileRequest,
    CompileResponse,
    CompileResult,
    IrType,
    IrTypeList,
)

__all__ = [
    "CompileRequest",
    "CompileResponse",
    "CompileResult",
    "IrType",
    "IrTypeList",
]
