import shutil
import subprocess
from logging import getLogger

from .errors import InterpreterNotFoundError, QueryError

logger = getLogger(__name__)


class Commander:
    """Provides terminal-like access to an interpreter: arguments in, trimmed stdout out."""

    def command(self, *args: str) -> str:
        raise NotImplementedError


class SysCommander(Commander):
    """Spawns `program` for every command."""

    def __init__(self, program: str):
        self.program = program
        self._executable = None

    @property
    def executable(self) -> str:
        if self._executable is None:
            executable = shutil.which(self.program)
            if executable is None:
                logger.debug(f"Interpreter {self.program} is not on PATH")
                raise InterpreterNotFoundError(self.program)
            self._executable = executable
        return self._executable

    def command(self, *args: str) -> str:
        cmd = [self.executable, *args]
        logger.debug(f"Running {cmd}")
        try:
            result = subprocess.run(cmd, capture_output=True, universal_newlines=True,
                                    errors="replace", check=True)
        except OSError:
            logger.debug(f"Failed to launch {self.executable}")
            raise InterpreterNotFoundError(self.program) from None
        except subprocess.CalledProcessError as e:
            logger.debug(f"{self.executable} exited with code {e.returncode}")
            raise QueryError(self.program, e.returncode, e.stderr) from e
        return result.stdout.strip()

    def __repr__(self):
        return f"SysCommander({self.program!r})"
