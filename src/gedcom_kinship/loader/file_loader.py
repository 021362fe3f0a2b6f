"""
File Loader

Reads a GEDCOM file into the raw line sequence consumed by the parser.
"""

from __future__ import annotations

import os
from typing import List

from gedcom_kinship.logging import get_logger

log = get_logger(__name__)


def load_lines(path: str | os.PathLike) -> List[str]:
    """
    Return the non-blank lines of a GEDCOM file, without line terminators.

    Character set detection is not attempted: the file is read as UTF-8 and
    undecodable bytes are replaced.
    """
    if not os.path.exists(path):
        log.error(f"Input file does not exist: {path}")
        raise FileNotFoundError(f"File not found: {path}")

    if not os.path.isfile(path):
        log.error(f"Input path is not a file: {path}")
        raise ValueError(f"Input path is not a file: {path}")

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = [raw.rstrip("\r\n") for raw in f]

    # Blank lines are not meaningful in GEDCOM.
    lines = [line for line in lines if line.strip()]
    log.info(f"Loaded {len(lines)} lines from {path}")
    return lines
