"""
Module: converter.output.writer

Purpose:
    Name and save a finished PDF. The conversion itself never touches the
    filesystem; the GUI and CLI call these helpers once the user has chosen
    where the result goes.

Key Functions:
    - suggested_filename(): converted-images-<unix ms>.pdf
    - write_pdf(): Write PDF bytes to disk
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from ..config import OUTPUT_FILENAME_PREFIX

logger = logging.getLogger(__name__)


def suggested_filename(timestamp_ms: Optional[int] = None) -> str:
    """
    Default filename for a converted document.

    Args:
        timestamp_ms: Unix timestamp in milliseconds (default: now)

    Example:
        >>> suggested_filename(1700000000000)
        'converted-images-1700000000000.pdf'
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return f"{OUTPUT_FILENAME_PREFIX}-{timestamp_ms}.pdf"


def write_pdf(data: bytes, output_path: Path) -> Path:
    """
    Write PDF bytes, creating parent directories as needed.

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info(f"Saved PDF to {output_path} ({len(data)} bytes)")
    return output_path
