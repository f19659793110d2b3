"""MCP server for the Rust IR explorer.

Exposes the compile endpoint as MCP tools so editors and agents can ask
rustc for HIR, MIR and friends without going through HTTP.

Uses STDIO transport.
"""

import asyncio

from mcp.server.fastmcp import FastMCP

from irview_server.models import CompileResult
from irview_server.services.compiler import get_compiler
from irview_server.services.ir import DEFAULT_IR_TYPE, VALID_IR_TYPES, rustc_flag

mcp = FastMCP("irview")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _format_result(result: CompileResult, ir_type: str) -> str:
    """Format a CompileResult as Markdown."""
    status = "succeeded" if result.success else "failed"
    lines = [f"**rustc {status}** (`-Zunpretty={ir_type}`)", ""]
    if result.ir_output:
        lines += ["## Output", "", "```", result.ir_output.rstrip("\n"), "```", ""]
    if result.messages:
        lines += ["## Messages", "", "```", result.messages.rstrip("\n"), "```", ""]
    if not result.ir_output and not result.messages:
        lines.append("(no output)")
    return "\n".join(lines).rstrip("\n")


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
def list_ir_types() -> str:
    """List the intermediate representations rustc can print.

    Any other value passed to `compile_to_ir` falls back to the default.
    """
    lines = ["Supported IR kinds:", ""]
    for kind in VALID_IR_TYPES:
        marker = "  (default)" if kind == DEFAULT_IR_TYPE else ""
        lines.append(f"  {kind}{marker}")
    return "\n".join(lines)


@mcp.tool()
async def compile_to_ir(source: str, ir_type: str = DEFAULT_IR_TYPE) -> str:
    """Compile a Rust snippet with nightly rustc and return the requested IR.

    Args:
        source: Complete Rust source for a single crate (include `fn main`).
        ir_type: One of the kinds from `list_ir_types`, e.g. "hir", "mir",
                 "thir-flat". Unknown kinds fall back to "hir".
    """
    result = await asyncio.to_thread(get_compiler().compile, source, ir_type)
    return _format_result(result, rustc_flag(ir_type))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """Run the irview MCP server on STDIO transport."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
