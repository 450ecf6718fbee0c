"""
batchscribe.logging - Centralized logging configuration.

Every stage reports progress through the ``batchscribe`` logger. FFmpeg and
Whisper output is forwarded line by line at DEBUG, so it only shows up with
``--verbose``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("batchscribe")


def configure_logging(verbose: bool = False) -> None:
    """Configure the console log sink for a batch run.

    Args:
        verbose: If True, log at DEBUG and include engine output;
            otherwise log per-file progress at INFO
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
