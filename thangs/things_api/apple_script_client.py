"""AppleScript execution bridge for the Things 3 CLI.

Two layers live here:

* :func:`execute_applescript` is the default *transport*: it writes a script
  to a temporary file, runs it through ``osascript`` and returns stdout with
  leading/trailing whitespace stripped. Any non-zero exit status raises
  :class:`AppleScriptExecutionError` with stderr attached.
* :class:`ThingsBridge` wraps any transport (``script -> str``), checks that
  Things 3 is running before sending the real script, and normalises the
  transport's failures into the error kinds of :mod:`.errors`.

Tests substitute the transport; nothing else in the package calls
``osascript`` directly.
"""
from __future__ import annotations

import os
import subprocess
import tempfile
from typing import Callable, Final, Optional

from ..utils.config import get_config
from ..utils.logger import get_logger
from . import protocol
from .errors import AppleScriptExecutionError, Things3NotAccessibleError
from .script_builder import generate_process_check_applescript

__all__: Final = ["execute_applescript", "ThingsBridge", "get_default_bridge"]

log = get_logger(__name__)

Transport = Callable[[str], str]

NOT_RUNNING_MESSAGE: Final = "Things 3 is not running. Please open Things 3 and try again."


def _write_temp_applescript(script: str) -> str:
    """Write *script* to a temporary *.applescript* file and return its path."""
    tmp_file = tempfile.NamedTemporaryFile(mode="w", delete=False, suffix=".applescript", encoding="utf-8")
    tmp_file.write(script)
    tmp_file.flush()
    tmp_file.close()
    return tmp_file.name


def execute_applescript(script: str) -> str:  # noqa: D401
    """Run an AppleScript snippet and return its *stdout* as ``str``."""
    script_path = _write_temp_applescript(script)

    try:
        cmd = [get_config("THANGS_OSASCRIPT", "osascript"), script_path]
        try:
            process = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            raise AppleScriptExecutionError(f"Could not run {cmd[0]}: {e}", e) from e
        if process.returncode != 0:
            raise AppleScriptExecutionError(
                f"AppleScript execution failed (code {process.returncode}): {process.stderr.strip()}"
            )

        return process.stdout.strip()
    finally:
        # Ensure the temporary file is always removed.
        try:
            os.remove(script_path)
        except FileNotFoundError:
            pass


def _mentions_embedded_error(message: str) -> bool:
    return any(tag in message for tag in protocol.EMBEDDED_ERROR_TAGS)


def _is_not_accessible(message: str) -> bool:
    return any(marker in message for marker in protocol.NOT_ACCESSIBLE_MARKERS)


class ThingsBridge:
    """Send scripts to Things 3 through an injectable transport."""

    def __init__(self, transport: Optional[Transport] = None, process_name: Optional[str] = None):
        self.transport = transport or execute_applescript
        self.process_name = process_name or get_config("THANGS_PROCESS_NAME", "Things3")

    def is_accessible(self) -> bool:
        """Check if Things 3 is running and accessible."""
        try:
            result = self.transport(generate_process_check_applescript(self.process_name))
        except Exception as e:  # any transport failure means we could not look
            log.debug("Process check failed: %s", e)
            return False
        return result.strip() == "true"

    def verify_access(self) -> None:
        if not self.is_accessible():
            raise Things3NotAccessibleError(NOT_RUNNING_MESSAGE)

    def run(self, script: str) -> str:
        """Verify Things 3 is up, then execute *script* and return its output."""
        self.verify_access()
        log.debug("Generated AppleScript:\n%s", script)
        try:
            result = self.transport(script)
        except Things3NotAccessibleError:
            raise
        except Exception as e:
            normalized = self._normalize_failure(e)
            if normalized is e:
                raise
            raise normalized from e
        log.debug("AppleScript result: %r", result)
        return result

    @staticmethod
    def _normalize_failure(error: Exception) -> AppleScriptExecutionError:
        message = getattr(error, "message", None) or str(error)
        if _mentions_embedded_error(message):
            # Tagged errors are decoded by the caller that emitted the tag.
            return AppleScriptExecutionError(message, error)
        if _is_not_accessible(message):
            return Things3NotAccessibleError()
        if isinstance(error, AppleScriptExecutionError):
            return error
        return AppleScriptExecutionError(f"AppleScript execution failed: {message}", error)


def get_default_bridge() -> ThingsBridge:
    return ThingsBridge()
