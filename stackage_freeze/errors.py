class FreezeError(Exception):
    """Base exception for every failed freeze step."""
    pass

class VersionDetectionError(FreezeError):
    """Raised when the local toolchain reports no usable version."""
    pass

class OutputDirectoryError(FreezeError):
    """Raised when the target directory does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Output directory does not exist: {path}")

class FetchError(FreezeError):
    """Raised when an HTTP request yields no usable response."""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")

class ResolverNotFoundError(FreezeError):
    """Raised when the listing is exhausted without a matching snapshot."""

    def __init__(self, version, max_pages, stream):
        self.version = version
        self.max_pages = max_pages
        self.stream = stream
        super().__init__(
            f"No resolver found for ghc {version} in the first {max_pages} page(s) "
            f"of {stream.label} snapshots"
        )

class ProjectRootNotFoundError(FreezeError):
    """Raised when no project root can be discovered."""

    def __init__(self, start):
        self.start = start
        super().__init__(f"No project root found from {start}")
