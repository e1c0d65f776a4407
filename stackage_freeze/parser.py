"""
Snapshot extraction from Stackage listing pages.
"""

from bs4 import BeautifulSoup
from stackage_freeze.core import SNAPSHOT_LIST_CLASS
from stackage_freeze.models import SnapshotEntry

def _first_child(tag, name):
    """First direct child element with the given tag name, or None."""
    return tag.find(name, recursive=False)

def iter_snapshots(html):
    """
    Yield a SnapshotEntry for every <li><strong><a href> in each
    <ul class="snapshots">, in document order.
    List items without that shape are skipped.
    """
    soup = BeautifulSoup(html, 'html.parser')

    for ul in soup.find_all('ul', class_=SNAPSHOT_LIST_CLASS):
        for li in ul.find_all('li', recursive=False):
            strong = _first_child(li, 'strong')
            if strong is None:
                continue
            a = _first_child(strong, 'a')
            if a is None or not a.has_attr('href'):
                continue
            yield SnapshotEntry(description=a.get_text(), href=a['href'])

def find_matching_snapshot(html, target_version, stream):
    """Return the first entry on the page matching version and stream, or None."""
    for entry in iter_snapshots(html):
        if entry.matches(target_version, stream):
            return entry
    return None
