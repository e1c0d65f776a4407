"""
Detect the version of the locally installed GHC.
"""

import logging
import re
import shlex
import subprocess
from typing import Optional

from stackage_freeze.core import GHC_COMMAND

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")

def parse_version(text: str) -> Optional[str]:
    """First N.N.N substring of the text, or None."""
    if not text:
        return None
    match = VERSION_PATTERN.search(text)
    return match.group(0) if match else None

def detect_ghc_version(command: Optional[str] = None) -> Optional[str]:
    """
    Run `<ghc> --version` and pull the version out of its combined output.
    Returns None if the command cannot be run or prints no version.
    """
    cmd = shlex.split(command or GHC_COMMAND) + ["--version"]

    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.warning(f"[GHC] could not run {' '.join(cmd)}: {e}")
        return None

    version = parse_version(result.stdout)
    if version is None:
        logger.warning(f"[GHC] no version in output of {' '.join(cmd)}: {result.stdout.strip()!r}")
    else:
        logger.info(f"[GHC] detected version {version}")
    return version
