"""
CLI Output Formatting Module (SSOT)

This module provides consistent terminal output for the sync tools.
Build consoles (CI runners, elevated PowerShell on Windows) can break
UTF-8 encoding, so every symbol has an ASCII fallback.

Usage:
    from versionsync.cli_output import CLIOutput

    out = CLIOutput.detect()
    out.info("Updated Cargo.toml to 1.2.3")
    out.error("Failed!")
"""

import os
import shutil
import sys
from typing import Optional, TextIO

from rich.console import Console


class CLIOutput:
    """
    SSOT for consistent CLI output formatting.

    Features:
    - ASCII-safe mode for broken consoles
    - Consistent info/error prefixes
    - Errors go to stderr, everything else to stdout

    Rendering goes through rich with markup and highlighting disabled,
    so versions and paths print exactly as given.
    """

    # Unicode symbols (preferred)
    UNICODE_SYMBOLS = {
        "info": "✓",
        "error": "✗",
    }

    # ASCII fallbacks (for broken consoles)
    ASCII_SYMBOLS = {
        "info": "[OK]",
        "error": "[XX]",
    }

    def __init__(
        self,
        use_unicode: bool = True,
        width: int = 80,
        indent: int = 0,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """
        Initialize CLI output formatter.

        Args:
            use_unicode: Use Unicode symbols (True) or ASCII fallback (False)
            width: Console width; long lines are never wrapped
            indent: Left margin indent (spaces)
            stdout: Stream for regular output (default: sys.stdout at print time)
            stderr: Stream for errors (default: sys.stderr at print time)
        """
        self.use_unicode = use_unicode
        self.width = width
        self.indent = indent
        self._symbols = self.UNICODE_SYMBOLS if use_unicode else self.ASCII_SYMBOLS
        self._prefix = " " * indent
        self._stdout = stdout
        self._stderr = stderr

    @classmethod
    def detect(cls, width: Optional[int] = None) -> "CLIOutput":
        """
        Auto-detect console capabilities and return appropriate formatter.

        Checks for:
        - Terminal width
        - stdout encoding
        - PYTHONIOENCODING
        """
        if width is None:
            width = shutil.get_terminal_size(fallback=(80, 24)).columns

        use_unicode = True

        encoding = getattr(sys.stdout, "encoding", None) or ""
        if encoding and "utf" not in encoding.lower():
            use_unicode = False

        io_encoding = os.environ.get("PYTHONIOENCODING", "")
        if io_encoding and "utf" not in io_encoding.lower():
            use_unicode = False

        return cls(use_unicode=use_unicode, width=width)

    @property
    def sym(self) -> dict:
        """Get current symbol set."""
        return self._symbols

    def _console(self, stream: TextIO) -> Console:
        return Console(
            file=stream,
            width=self.width,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _print(self, msg: str, error: bool = False):
        """Print with safe encoding fallback."""
        stream = (self._stderr or sys.stderr) if error else (self._stdout or sys.stdout)
        console = self._console(stream)
        try:
            console.print(msg)
        except UnicodeEncodeError:
            safe_msg = msg.encode("ascii", errors="replace").decode("ascii")
            console.print(safe_msg)

    def info(self, message: str, prefix: Optional[str] = None):
        """Print info message."""
        sym = prefix or self._symbols["info"]
        self._print(f"{self._prefix}{sym} {message}")

    def error(self, message: str, prefix: Optional[str] = None):
        """Print error message to stderr."""
        sym = prefix or self._symbols["error"]
        self._print(f"{self._prefix}{sym} {message}", error=True)

    def log(self, message: str):
        """Print plain log message with indent."""
        self._print(f"{self._prefix}{message}")


# Module-level convenience functions
_default_output = None


def get_output() -> CLIOutput:
    """Get or create default CLIOutput instance."""
    global _default_output
    if _default_output is None:
        _default_output = CLIOutput.detect()
    return _default_output
