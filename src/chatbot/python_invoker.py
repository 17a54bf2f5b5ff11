import logging
import subprocess
import sys

from errors.errors import PythonInvokerError
from models.tool_models import PythonScriptResult

logger = logging.getLogger(__name__)


class PythonInvoker:
    """Run a Python snippet in a child interpreter and capture its output."""

    def __init__(self, executable: str | None = None, *, timeout: float = 30) -> None:
        self.executable = executable or sys.executable
        self.timeout = timeout

    def run_script(self, script: str, args: list[str] | None = None) -> PythonScriptResult:
        args = args or []
        logger.info("Executing Python script with args: %s", args)
        try:
            completed = subprocess.run(
                [self.executable, "-c", script, *args],
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            logger.error("Python script timed out after %ss", self.timeout)
            raise PythonInvokerError(
                f"Script timed out after {self.timeout} seconds"
            ) from e
        except OSError as e:
            raise PythonInvokerError(f"Failed to execute Python script: {e}") from e

        result = PythonScriptResult(
            stdout=completed.stdout,
            stderr=completed.stderr,
            exit_code=completed.returncode,
        )
        if completed.returncode != 0:
            logger.error(
                "Python script execution failed with exit code: %s", result.exit_code
            )
            raise PythonInvokerError(result.render())

        logger.info("Python script executed successfully")
        return result
