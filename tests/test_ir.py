import pytest

from irview_server.models import IrType
from irview_server.services.ir import DEFAULT_IR_TYPE, VALID_IR_TYPES, rustc_flag


def test_sixteen_kinds_in_menu_order():
    assert len(VALID_IR_TYPES) == 16
    assert VALID_IR_TYPES[0] == "normal"
    assert VALID_IR_TYPES[-1] == "mir-cfg"
    assert DEFAULT_IR_TYPE == "hir"


@pytest.mark.parametrize("kind", [k.value for k in IrType])
def test_known_kind_passes_through(kind):
    assert rustc_flag(kind) == kind


@pytest.mark.parametrize(
    "value",
    ["bogus-kind", "", "HIR", " hir", "mir ", "hir,typed,identified", "llvm-ir", "expanded, hygiene"],
)
def test_unknown_kind_falls_back_to_hir(value):
    assert rustc_flag(value) == "hir"
