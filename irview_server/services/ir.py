"""Mapping from requested IR kind to the -Zunpretty value passed to rustc."""

from typing import Tuple

from ..models import IrType

VALID_IR_TYPES: Tuple[str, ...] = tuple(kind.value for kind in IrType)
DEFAULT_IR_TYPE: str = IrType.hir.value


def rustc_flag(value: str) -> str:
    """Return value if rustc accepts it as an unpretty kind, else the default.

    Matching is exact: "HIR" and " hir" both fall back to "hir" too.
    """
    if value in VALID_IR_TYPES:
        return value
    return DEFAULT_IR_TYPE
