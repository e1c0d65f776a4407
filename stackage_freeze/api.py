"""
FILE DESCRIPTION: Public entry points. Each validates its preconditions before
any network call, then runs Detector -> Locator -> Fetcher as far as needed.
KEY FUNCTIONS: freeze_by_resolver, freeze_by_ghc_version, freeze_by_system_ghc, freeze_project
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import urljoin

from stackage_freeze.core import STACKAGE_URL, MAX_PAGES
from stackage_freeze.errors import (
    OutputDirectoryError,
    ProjectRootNotFoundError,
    ResolverNotFoundError,
    VersionDetectionError,
)
from stackage_freeze.fetcher import new_session
from stackage_freeze.freeze import fetch_freeze_file
from stackage_freeze.ghc import detect_ghc_version
from stackage_freeze.models import Stream
from stackage_freeze.project import find_project_root
from stackage_freeze.resolver import find_resolver

logger = logging.getLogger(__name__)

def _require_directory(output_directory) -> Path:
    path = Path(output_directory)
    if not path.is_dir():
        raise OutputDirectoryError(path)
    return path

@contextmanager
def _session_scope(session):
    """Yield the caller's session, or a fresh one that is closed afterwards."""
    if session is not None:
        yield session
        return
    owned = new_session()
    try:
        yield owned
    finally:
        owned.close()

def resolver_url(resolver):
    """lts-16.22 -> https://www.stackage.org/lts-16.22"""
    return f"{STACKAGE_URL}/{resolver}"

def absolute_snapshot_url(href):
    # Listing pages may link snapshots relative to the host.
    return urljoin(STACKAGE_URL + "/", href).rstrip("/")

def freeze_by_resolver(resolver, output_directory, session=None) -> Path:
    """Write the freeze file of a named resolver, e.g. 'lts-16.22'."""
    directory = _require_directory(output_directory)
    with _session_scope(session) as http:
        return fetch_freeze_file(directory, resolver_url(resolver), session=http)

def freeze_by_ghc_version(version, output_directory, max_pages=MAX_PAGES,
                          use_unstable=False, session=None) -> Path:
    """
    Find the newest snapshot for `version` and write its freeze file.
    Raises ResolverNotFoundError when no snapshot matches within max_pages.
    """
    directory = _require_directory(output_directory)
    with _session_scope(session) as http:
        href = find_resolver(version, max_pages=max_pages, use_unstable=use_unstable, session=http)
        if href is None:
            raise ResolverNotFoundError(version, max_pages, Stream.select(use_unstable))
        return fetch_freeze_file(directory, absolute_snapshot_url(href), session=http)

def freeze_by_system_ghc(output_directory, max_pages=MAX_PAGES, use_unstable=False,
                         session=None, ghc_command=None) -> Path:
    """Same as freeze_by_ghc_version, using the version of the installed ghc."""
    directory = _require_directory(output_directory)
    version = detect_ghc_version(ghc_command)
    if version is None:
        raise VersionDetectionError("Could not detect the installed ghc version")
    return freeze_by_ghc_version(version, directory, max_pages=max_pages,
                                 use_unstable=use_unstable, session=session)

def freeze_project(start=None, max_pages=MAX_PAGES, use_unstable=False,
                   find_root=None, session=None, ghc_command=None) -> Path:
    """Write the freeze file into the project root enclosing `start`."""
    lookup = find_root or find_project_root
    root = lookup(start)
    if root is None:
        raise ProjectRootNotFoundError(start if start is not None else Path.cwd())
    logger.info(f"[FREEZE] project root: {root}")
    return freeze_by_system_ghc(root, max_pages=max_pages, use_unstable=use_unstable,
                                session=session, ghc_command=ghc_command)
