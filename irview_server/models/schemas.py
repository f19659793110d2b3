from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class IrType(str, Enum):
    """Output kinds accepted by rustc's -Zunpretty flag."""
    normal = "normal"
    identified = "identified"
    expanded = "expanded"
    expanded_identified = "expanded,identified"
    expanded_hygiene = "expanded,hygiene"
    ast_tree = "ast-tree"
    ast_tree_expanded = "ast-tree,expanded"
    hir = "hir"
    hir_identified = "hir,identified"
    hir_typed = "hir,typed"
    hir_tree = "hir-tree"
    thir_tree = "thir-tree"
    thir_flat = "thir-flat"
    mir = "mir"
    stable_mir = "stable-mir"
    mir_cfg = "mir-cfg"


# Compile models

class CompileRequest(BaseModel):
    """Compilation request.

    ir_type stays a plain string: unknown kinds are coerced, not rejected.
    """
    source: str
    ir_type: str


class CompileResult(BaseModel):
    """Outcome of one rustc invocation."""
    model_config = ConfigDict(frozen=True)

    success: bool
    ir_output: str = ""
    messages: str = ""


class CompileResponse(BaseModel):
    """Compilation response."""
    success: bool
    ir_output: str
    messages: str


class IrTypeList(BaseModel):
    """Supported IR kinds, in menu order."""
    default: str
    ir_types: List[str]
