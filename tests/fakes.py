"""
Stub HTTP session shared by the test modules.
"""

from unittest.mock import MagicMock

import requests


def listing_page(*items):
    """Wrap raw <li> markup in a Stackage-style snapshot list."""
    return '<html><body><ul class="snapshots">' + "".join(items) + "</ul></body></html>"


def snapshot_item(href, text):
    return f'<li><strong><a href="{href}">{text}</a></strong>, published 2 days ago</li>'


class FakeSession:
    """
    Answers listing requests from `pages` (page number -> html) and any other
    URL from `files` (url -> bytes). Records every request in `calls`.
    """

    def __init__(self, pages=None, files=None, error=None):
        self.pages = pages or {}
        self.files = files or {}
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, params=None, **kwargs):
        self.calls.append((url, dict(params or {})))
        if self.error is not None:
            raise self.error

        response = MagicMock()
        response.headers = {"Content-Type": "text/plain; charset=utf-8", "Content-Length": "0"}
        if params and "page" in params:
            html = self.pages.get(params["page"], listing_page())
            response.status_code = 200
            response.text = html
            response.content = html.encode("utf-8")
        elif url in self.files:
            response.status_code = 200
            response.content = self.files[url]
            response.text = self.files[url].decode("utf-8")
        else:
            response.status_code = 404
            response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Not Found")
        return response

    def close(self):
        self.closed = True

    @property
    def page_requests(self):
        return [params["page"] for _, params in self.calls if "page" in params]
