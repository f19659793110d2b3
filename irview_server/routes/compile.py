"""Compile endpoint."""

import asyncio

from fastapi import APIRouter

from ..models import CompileRequest, CompileResponse
from ..services.compiler import get_compiler

router = APIRouter()


@router.post("/compile", response_model=CompileResponse)
async def compile_source(request: CompileRequest):
    """Compile a Rust snippet and return the requested IR.

    POST /api/compile - rustc runs on a worker thread; every outcome is a 200.
    """
    compiler = get_compiler()
    result = await asyncio.to_thread(compiler.compile, request.source, request.ir_type)
    return CompileResponse(
        success=result.success,
        ir_output=result.ir_output,
        messages=result.messages,
    )
