from stackage_freeze.models import SnapshotEntry, Stream
from stackage_freeze.errors import (
    FreezeError,
    VersionDetectionError,
    OutputDirectoryError,
    FetchError,
    ResolverNotFoundError,
    ProjectRootNotFoundError,
)
from stackage_freeze.ghc import detect_ghc_version, parse_version
from stackage_freeze.resolver import find_resolver
from stackage_freeze.freeze import fetch_freeze_file
from stackage_freeze.project import find_project_root
from stackage_freeze.api import (
    freeze_by_resolver,
    freeze_by_ghc_version,
    freeze_by_system_ghc,
    freeze_project,
)
