"""
HTTP fetching module.
Every request is a single blocking GET; any failure is fatal to the caller.
"""

import logging
import time
import requests
from stackage_freeze.core import USER_AGENT, REQUEST_TIMEOUT
from stackage_freeze.errors import FetchError

logger = logging.getLogger(__name__)

def new_session():
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session

def fetch(url, session=None, params=None):
    """
    GET a URL and return the requests.Response on 2xx.
    Timeouts, connection errors and non-2xx statuses all raise FetchError.
    """
    http = session or requests
    start_time = time.time()

    try:
        r = http.get(
            url,
            params=params,
            timeout=REQUEST_TIMEOUT,
            headers={"User-Agent": USER_AGENT},
            allow_redirects=True,
        )
        r.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise FetchError(url, "timeout") from e
    except requests.exceptions.ConnectionError as e:
        raise FetchError(url, "connection_error") from e
    except requests.exceptions.HTTPError as e:
        raise FetchError(url, f"http_error {r.status_code}") from e
    except requests.exceptions.RequestException as e:
        raise FetchError(url, f"request_error: {e}") from e

    fetch_time_ms = int((time.time() - start_time) * 1000)
    logger.debug(f"[FETCH] {url} -> {r.status_code} ({len(r.content)} bytes, {fetch_time_ms}ms)")
    return r
