"""
Subprocess Runner.

Runs an external program and returns its exit status and captured
output as a value. Nothing is redirected at the file-descriptor level.
"""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from appmgr.core.exceptions import ProcessLaunchError
from appmgr.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured streams of a finished process."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_process(
    argv: Sequence[str],
    input_text: str | None = None,
    timeout: float | None = None,
) -> ProcessResult:
    """
    Run a program to completion and capture stdout and stderr.

    Args:
        argv: Program and arguments.
        input_text: Text written to the program's stdin, if any.
        timeout: Seconds before the program is killed.

    Returns:
        ProcessResult with the exit status and decoded output.

    Raises:
        ProcessLaunchError: If the program cannot be started or times out.
    """
    log_with_source(logger, "process", "debug", "Launching process", argv=list(argv))

    try:
        completed = subprocess.run(
            list(argv),
            input=input_text,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, ValueError) as e:
        log_with_source(logger, "process", "error", "Process launch failed", argv=list(argv), error=str(e))
        raise ProcessLaunchError(f"Cannot run {argv[0]}: {e}") from e
    except subprocess.TimeoutExpired as e:
        log_with_source(logger, "process", "error", "Process timed out", argv=list(argv), timeout=timeout)
        raise ProcessLaunchError(f"{argv[0]} did not finish within {timeout} seconds") from e

    log_with_source(
        logger,
        "process",
        "debug",
        "Process finished",
        argv=list(argv),
        returncode=completed.returncode,
    )
    return ProcessResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
