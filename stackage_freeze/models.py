from dataclasses import dataclass
from enum import Enum

class Stream(Enum):
    """Snapshot streams listed by Stackage, valued by their label prefix."""
    LTS = "LTS"
    NIGHTLY = "Stackage Nightly"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def select(cls, use_unstable: bool) -> "Stream":
        return cls.NIGHTLY if use_unstable else cls.LTS

@dataclass(frozen=True)
class SnapshotEntry:
    """
    One list item of a snapshot listing page.
    INVARIANT: Transient. Only the chosen entry's href outlives its page.
    """
    description: str
    href: str

    def matches(self, target_version: str, stream: Stream) -> bool:
        # Plain substring containment: "2.8.6" also matches "12.8.6".
        return target_version in self.description and self.description.startswith(stream.label)
