"""Cluster CLI wrapper."""

import subprocess
from typing import Callable, List, Optional, Tuple

from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BINARY = "oc"

# (program, args) -> (success, combined stdout/stderr)
ProcessLauncher = Callable[[str, List[str]], Tuple[bool, str]]


def run_process(program: str, args: List[str]) -> Tuple[bool, str]:
    """Run a program and return success status and combined output."""
    cmd = [program] + list(args)
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
        return True, result.stdout
    except subprocess.CalledProcessError as e:
        output = (e.output or e.stdout or "").strip()
        return False, output or f"exit status {e.returncode}"
    except FileNotFoundError:
        return False, f"{program} command not found"
    except OSError as e:
        return False, str(e)


class ClusterCLI:
    """Wrapper for the external cluster command-line tool."""

    def __init__(self, binary: str = DEFAULT_BINARY, launcher: Optional[ProcessLauncher] = None):
        self.binary = binary
        self.launcher = launcher or run_process

    def execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute a command and return success status and output."""
        logger.debug(f"Executing: {self.binary} {' '.join(args)}")

        success, output = self.launcher(self.binary, list(args))
        if not success:
            logger.debug(f"Command failed: {output}")
        return success, output
