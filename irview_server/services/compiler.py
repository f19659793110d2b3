"""Compiler service: runs nightly rustc to print an intermediate representation."""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from ..config import Settings, settings as default_settings
from ..models import CompileResult
from .ir import rustc_flag

logger = logging.getLogger(__name__)


class CompilerService:
    """Service for turning a Rust snippet into rustc's -Zunpretty output."""

    SOURCE_SUFFIX = ".rs"

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def command(self, ir_type: str, source_path: Path) -> List[str]:
        """Build the rustc command line for a source file."""
        s = self.settings
        return [
            s.rustup_bin,
            "run",
            s.toolchain,
            "rustc",
            f"-Zunpretty={rustc_flag(ir_type)}",
            f"--edition={s.edition}",
            f"--crate-name={s.crate_name}",
            str(source_path),
        ]

    def compile(self, source: str, ir_type: str) -> CompileResult:
        """Compile source and return rustc's output for the requested IR kind.

        Local failures (temp file, write, spawn, timeout) come back as a
        failed result with empty ir_output. A non-zero rustc exit keeps
        whatever stdout/stderr it produced.
        """
        try:
            fd, name = tempfile.mkstemp(suffix=self.SOURCE_SUFFIX)
        except OSError as e:
            logger.warning("Temp file creation failed: %s", e)
            return _failure(f"Failed to create temp file: {e}")

        source_path = Path(name)
        try:
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(source.encode("utf-8"))
            except (OSError, UnicodeError) as e:
                logger.warning("Writing %s failed: %s", source_path, e)
                return _failure(f"Failed to write source: {e}")

            return self._run(self.command(ir_type, source_path))
        finally:
            source_path.unlink(missing_ok=True)

    def _run(self, cmd: List[str]) -> CompileResult:
        timeout = self.settings.compile_timeout
        logger.debug("Running %s", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning("rustc timed out after %ss", timeout)
            return _failure(f"rustc timed out after {timeout}s")
        except OSError as e:
            logger.warning("Spawning %s failed: %s", cmd[0], e)
            return _failure(f"Failed to run rustc: {e}")

        return CompileResult(
            success=completed.returncode == 0,
            ir_output=_decode(completed.stdout),
            messages=_decode(completed.stderr),
        )


def _failure(message: str) -> CompileResult:
    return CompileResult(success=False, ir_output="", messages=message)


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


# Global singleton
_compiler: Optional[CompilerService] = None


def get_compiler() -> CompilerService:
    """Get the global compiler service instance."""
    global _compiler
    if _compiler is None:
        _compiler = CompilerService()
    return _compiler
