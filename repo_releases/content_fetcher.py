from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin

import requests

from configuration import Configuration as Config
from errors import FetchError, RedirectError, TooManyRedirects
from loggers.formula_gen_logger import formula_gen_logger as logger
from repo_releases.http_session import build_session


class ContentFetcher:
    """
    Downloads the full body of a URL.

    Redirects are followed by hand so the number of hops stays bounded:
    at most `max_redirects` redirects are accepted, the next one raises
    TooManyRedirects.
    """

    def __init__(
        self,
        *,
        user_agent: str = Config.user_agent,
        timeout: float = Config.request_timeout_seconds,
        max_redirects: int = Config.max_redirects,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.session = session if session is not None else build_session(user_agent)

    def fetch(self, url: str) -> bytes:
        current_url = url
        redirects_left = self.max_redirects

        while True:
            resp = self._get(current_url)
            status = resp.status_code

            if 200 <= status < 300:
                return resp.content

            if 300 <= status < 400:
                location = resp.headers.get("Location")
                if not location:
                    raise RedirectError(
                        "Redirect without location",
                        status=status,
                        context={"url": current_url},
                    )
                if redirects_left <= 0:
                    raise TooManyRedirects(
                        f"Too many redirects (limit {self.max_redirects})",
                        status=status,
                        context={"url": url, "last_url": current_url},
                    )
                redirects_left -= 1
                # relative locations resolve against the URL that sent the redirect
                next_url = urljoin(current_url, location)
                logger.debug(f"Redirect {status}: {current_url} -> {next_url}")
                current_url = next_url
                continue

            raise FetchError(
                f"HTTP {status}: {resp.reason or ''}".rstrip(),
                status=status,
                context={"url": current_url},
            )

    def _get(self, url: str) -> requests.Response:
        try:
            return self.session.get(url, timeout=self.timeout, allow_redirects=False)
        except requests.RequestException as e:
            raise FetchError(f"Request failed: {e}", context={"url": url}) from e

    def close(self) -> None:
        self.session.close()
