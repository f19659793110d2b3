"""IR kind listing endpoint."""

from fastapi import APIRouter

from ..models import IrTypeList
from ..services.ir import DEFAULT_IR_TYPE, VALID_IR_TYPES

router = APIRouter()


@router.get("/ir-types", response_model=IrTypeList)
async def list_ir_types():
    """List the accepted ir_type values and the fallback used for anything else."""
    return IrTypeList(default=DEFAULT_IR_TYPE, ir_types=list(VALID_IR_TYPES))
