"""
Download a snapshot's cabal.config and store it as cabal.project.freeze.
"""

import logging
from pathlib import Path

from stackage_freeze.core import CABAL_CONFIG_NAME, FREEZE_FILE_NAME
from stackage_freeze.fetcher import fetch

logger = logging.getLogger(__name__)

def cabal_config_url(resolver_url):
    return f"{resolver_url}/{CABAL_CONFIG_NAME}"

def fetch_freeze_file(output_directory, resolver_url, session=None) -> Path:
    """
    GET <resolver_url>/cabal.config and write the response body, byte for byte,
    to <output_directory>/cabal.project.freeze.
    The status line and headers never reach the file: requests keeps them on
    the Response, separate from `content`.
    The directory is not checked here; callers validate it first.
    """
    url = cabal_config_url(resolver_url)
    response = fetch(url, session=session)

    target = Path(output_directory) / FREEZE_FILE_NAME
    target.write_bytes(response.content)
    logger.info(f"[FREEZE] wrote {len(response.content)} bytes from {url} to {target}")
    return target
