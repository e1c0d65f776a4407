"""
Locate the most recent Stackage snapshot built with a given GHC version.
"""

import logging
from typing import Optional

from stackage_freeze.core import STACKAGE_URL, MAX_PAGES
from stackage_freeze.fetcher import fetch
from stackage_freeze.models import Stream
from stackage_freeze.parser import find_matching_snapshot

logger = logging.getLogger(__name__)

def snapshots_url():
    return f"{STACKAGE_URL}/snapshots"

def find_resolver(target_version: str, max_pages: int = MAX_PAGES,
                  use_unstable: bool = False, session=None) -> Optional[str]:
    """
    FLOW: For page 1..max_pages -> GET the listing page -> scan its snapshot lists
    in document order -> return the href of the first entry whose text contains
    target_version and starts with the stream label.
    Returns None once max_pages pages were scanned without a match.
    Raises FetchError on the first page that cannot be retrieved.
    """
    if isinstance(max_pages, bool) or not isinstance(max_pages, int) or max_pages < 1:
        raise ValueError(f"max_pages must be a positive integer, got {max_pages!r}")

    stream = Stream.select(use_unstable)
    url = snapshots_url()

    for page in range(1, max_pages + 1):
        logger.info(f"[LOCATE] ghc {target_version} ({stream.label}): scanning page {page}/{max_pages}")
        response = fetch(url, session=session, params={"page": page})
        entry = find_matching_snapshot(response.text, target_version, stream)
        if entry is not None:
            logger.info(f"[LOCATE] matched '{entry.description}' -> {entry.href}")
            return entry.href

    logger.warning(f"[LOCATE] no {stream.label} snapshot for ghc {target_version} in {max_pages} page(s)")
    return None
