# ----------------------------
# GitHub release lookups (REST)
# ----------------------------
from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import requests

from configuration import Configuration as Config
from errors import FetchError, ReleaseNotFound
from loggers.formula_gen_logger import formula_gen_logger as logger
from models.release import Release
from repo_releases.http_session import build_session


class GitHubReleaseClient:
    def __init__(
        self,
        token: str = "",
        *,
        base_url: str = Config.github_api_base_url,
        user_agent: str = Config.user_agent,
        timeout: float = Config.request_timeout_seconds,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        token is a GitHub access token; when empty, requests go out
        unauthenticated (very low rate limits).
        """
        self.base = base_url.rstrip("/")
        self.timeout = timeout

        headers = {"Accept": "application/vnd.github+json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        if session is None:
            session = build_session(user_agent, headers)
        else:
            session.headers.update(headers)
        self.session = session

    def release_for_tag(self, repository: str, tag: str) -> Release:
        path = f"/repos/{repository}/releases/tags/{quote(tag, safe='')}"
        url = f"{self.base}{path}"

        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"GitHub REST request failed for {path}: {e}", context={"url": url}) from e

        if resp.status_code == 404:
            raise ReleaseNotFound(
                f"Release not found for {repository} at tag {tag}",
                context={"url": url},
            )
        if resp.status_code >= 400:
            logger.error(f"GitHub REST error {resp.status_code} for {path}: {resp.text[:300]}")
            raise FetchError(
                f"GitHub REST error {resp.status_code} for {path}: {resp.text[:300]}",
                status=resp.status_code,
                context={"url": url},
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise FetchError(f"GitHub REST returned invalid JSON for {path}", context={"url": url}) from e
        if not isinstance(payload, dict):
            raise FetchError(f"GitHub REST returned an unexpected payload for {path}", context={"url": url})

        release = Release.from_api(repository, payload)
        logger.debug(f"{repository}@{tag}: {len(release.assets)} asset(s)")
        return release

    def close(self) -> None:
        self.session.close()
