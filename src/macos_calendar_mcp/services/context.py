from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..config import AppSettings, get_settings
from ..core import ScriptBuilder
from ..core.dates import Clock
from ..data import OsascriptExecutor, ScriptExecutor


@dataclass(slots=True)
class ServiceContext:
    """Shared settings, clock and script executor for the calendar service."""

    settings: AppSettings = field(default_factory=get_settings)
    executor: Optional[ScriptExecutor] = None
    clock: Clock = datetime.now
    scripts: ScriptBuilder = field(init=False)

    def __post_init__(self) -> None:
        if self.executor is None:
            self.executor = OsascriptExecutor(self.settings.executor)
        self.scripts = ScriptBuilder(application=self.settings.executor.application)
