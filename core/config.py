"""Launch configuration: which executable the context menu invokes."""

import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .settings import AppSettings


class AppConfig:
    """
    Executable (and, when running from source, script) the shell commands point at.

    Args:
        executable: Program registered in the context-menu commands
        script: Entry script passed to the interpreter, None for a frozen build
        settings: User preferences; defaults are used when omitted
    """

    def __init__(self, executable: str, script: Optional[str] = None,
                 settings: Optional[AppSettings] = None):
        self.executable = str(executable)
        self.script = str(script) if script else None
        self.settings = settings if settings is not None else AppSettings()

    @classmethod
    def from_environment(cls, script: Optional[str] = None,
                         settings: Optional[AppSettings] = None) -> 'AppConfig':
        """Configuration for the running process."""
        if getattr(sys, 'frozen', False):
            return cls(sys.executable, settings=settings)

        # Prefer the windowless interpreter so Explorer does not flash a console
        python_path = Path(sys.executable)
        pythonw_path = python_path.with_name(f"{python_path.stem}w{python_path.suffix}")
        executable = pythonw_path if pythonw_path.exists() else python_path

        if script is None:
            script = Path(sys.argv[0]).resolve()
        return cls(str(executable), script=str(script), settings=settings)

    def command_for(self, action: str) -> str:
        """Registry command value invoking this program for one shell item."""
        prefix = f'"{self.executable}"'
        if self.script:
            prefix += f' "{self.script}"'
        return f'{prefix} {action} "%1"'

    def relaunch_target(self) -> Tuple[str, List[str]]:
        """Program and leading arguments used to start a new instance."""
        return self.executable, [self.script] if self.script else []
