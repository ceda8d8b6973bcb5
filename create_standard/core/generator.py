"""External base-template generator invocation."""
import subprocess
from pathlib import Path
from typing import List, Sequence

from create_standard.core.logger import get_logger

logger = get_logger(__name__)


class GeneratorError(RuntimeError):
    """Raised when the external generator cannot run or exits non-zero."""


class GeneratorRunner:
    """Runs the base-template generator (``npm create vite`` by default)."""

    def __init__(self, command: Sequence[str]):
        if not command:
            raise ValueError("Generator command must not be empty")
        self.command = list(command)

    def build_command(self, project_name: str, template_id: str) -> List[str]:
        """Command line for one project, e.g. ``npm create vite app -- --template vue-ts``."""
        return [*self.command, project_name, "--", "--template", template_id]

    def run(self, project_name: str, template_id: str, cwd: Path) -> None:
        """Generate ``project_name`` from ``template_id`` inside ``cwd``.

        Output is passed through to the terminal. Blocks until the generator
        exits.

        Raises:
            GeneratorError: If the executable is missing or exits non-zero
        """
        cmd = self.build_command(project_name, template_id)
        logger.info(f"Running generator: {' '.join(cmd)}")

        try:
            subprocess.run(cmd, cwd=cwd, check=True)
        except FileNotFoundError as exc:
            raise GeneratorError(f"Generator executable not found: {cmd[0]}") from exc
        except subprocess.CalledProcessError as exc:
            raise GeneratorError(
                f"Generator exited with code {exc.returncode}: {' '.join(cmd)}"
            ) from exc
