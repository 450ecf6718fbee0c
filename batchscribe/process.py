"""
batchscribe.process - External command execution.

Runs an engine to completion while forwarding its output line by line to
the package logger. Output is diagnostic only and never parsed.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from batchscribe.logging import logger


def run_streaming(cmd: Sequence[str], label: str) -> int:
    """Run a command, logging merged stdout/stderr as it arrives.

    Args:
        cmd: Command and arguments
        label: Short name prefixed to every logged line

    Returns:
        The process exit code
    """
    logger.debug("Running %s: %s", label, " ".join(cmd))
    proc = subprocess.Popen(
        list(cmd),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
    )
    if proc.stdout is not None:
        with proc.stdout:
            for line in proc.stdout:
                line = line.rstrip()
                if line:
                    logger.debug("[%s] %s", label, line)
    return proc.wait()
