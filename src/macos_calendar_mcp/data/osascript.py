from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol

from ..config.settings import ExecutorSettings
from ..domain import ExecutionError, ExecutionResult

logger = logging.getLogger(__name__)


class ScriptExecutor(Protocol):
    def execute(self, script: str) -> ExecutionResult: ...


@dataclass
class OsascriptExecutor:
    """Runs AppleScript through ``osascript`` and returns its trimmed stdout."""

    settings: ExecutorSettings

    def execute(self, script: str) -> ExecutionResult:
        command = [self.settings.osascript_path, "-e", script]
        logger.debug("Running osascript (%d chars)", len(script))
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.settings.timeout_seconds,
                check=False,
            )
        except FileNotFoundError as exc:
            logger.warning("osascript executable not found: %s", self.settings.osascript_path)
            raise ExecutionError(f"osascript executable not found: {self.settings.osascript_path}") from exc
        except subprocess.TimeoutExpired as exc:
            logger.warning("osascript timed out after %s seconds", self.settings.timeout_seconds)
            raise ExecutionError(f"osascript timed out after {self.settings.timeout_seconds} seconds") from exc

        if completed.returncode != 0:
            message = _failure_message(completed.stderr, completed.returncode)
            logger.warning("osascript failed: %s", message)
            raise ExecutionError(message)
        return ExecutionResult(raw_output=(completed.stdout or "").strip())


def _failure_message(stderr: Optional[str], returncode: int) -> str:
    detail = (stderr or "").strip()
    return detail or f"osascript exited with status {returncode}"
