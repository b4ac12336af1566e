import io
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest
from rich.console import Console

# Ensure project root is importable when running tests without installing the package
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from shipshape.api.exceptions import CommandFailedError  # noqa: E402
from shipshape.core.command_runner import CommandExecutor  # noqa: E402


class RecordingExecutor(CommandExecutor):
    """Records every command instead of spawning it; fails on request."""

    def __init__(self, exit_codes: Optional[Dict[str, int]] = None):
        self.exit_codes = exit_codes or {}
        self.calls: List[Tuple[str, Path]] = []

    async def run(self, command, cwd):
        self.calls.append((command, Path(cwd)))
        code = self.exit_codes.get(command, 0)
        if code != 0:
            raise CommandFailedError(command, exit_code=code)

    @property
    def commands(self) -> List[str]:
        return [command for command, _ in self.calls]


@pytest.fixture
def recording_executor():
    return RecordingExecutor()


@pytest.fixture
def quiet_console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def write_tree():
    """Create files from a {relative_path: content} mapping; None makes a directory."""

    def _write(root: Path, layout: Dict[str, Optional[str]]) -> Path:
        for rel, content in layout.items():
            path = root / rel
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content)
        return root

    return _write


def python_command(code: str) -> str:
    """Shell command running a snippet with the current interpreter."""
    return f'"{sys.executable}" -c "{code}"'
