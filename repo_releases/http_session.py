from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3 import Retry


def build_session(user_agent: str, headers: Optional[Dict[str, str]] = None) -> requests.Session:
    """
    Session shared by the release client and the content fetcher.

    Retries are switched off at the transport level: a failed request aborts
    the run instead of being replayed.
    """
    session = requests.Session()
    retries = Retry(total=0, raise_on_status=False, raise_on_redirect=False)
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)

    session.headers.update({"User-Agent": user_agent})
    if headers:
        session.headers.update(headers)
    return session
