from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from configuration import Configuration as Config
from errors import InvalidVersion
from loggers.formula_gen_logger import formula_gen_logger as logger
from models.resource_spec import ResourceGroup
from repo_releases.content_fetcher import ContentFetcher
from repo_releases.github.github_release_client import GitHubReleaseClient
from tools.asset_matcher import match_asset
from tools.formula_renderer import FormulaRenderer
from tools.integrity_recorder import build_record
from tools.metadata_store import MetadataStore
from tools.resource_table import load_resource_groups

VERSION_RE = re.compile(Config.version_pattern)


def validate_version(version: Optional[str]) -> str:
    """Check a release tag such as 'v1.4.45' and return it without the leading 'v'."""
    if not version:
        raise InvalidVersion("Version must be specified (e.g. v1.4.45)")
    if not VERSION_RE.match(version):
        raise InvalidVersion("Version must match pattern 'vX.Y.Z'", context={"version": version})
    return version[1:]


class FormulaGenerator:
    """
    One run: resolve the tagged release of every configured repository,
    download and hash the matching assets, render the formula, save the
    metadata. Nothing is written until every download and the rendering
    have succeeded.
    """

    def __init__(
        self,
        *,
        token: str = "",
        resource_groups: Optional[List[ResourceGroup]] = None,
        release_client: Optional[GitHubReleaseClient] = None,
        fetcher: Optional[ContentFetcher] = None,
        metadata_file: Union[str, Path] = Config.metadata_file,
        template_file: Union[str, Path] = Config.formula_template_file,
        output_file: Union[str, Path] = Config.formula_output_file,
    ) -> None:
        self.resource_groups = (
            resource_groups if resource_groups is not None else load_resource_groups(Config.resources_file)
        )
        self.release_client = release_client if release_client is not None else GitHubReleaseClient(token)
        self.fetcher = fetcher if fetcher is not None else ContentFetcher()
        self.metadata_file = Path(metadata_file)
        self.template_file = Path(template_file)
        self.output_file = Path(output_file)

    def generate(self, version: Optional[str], dry_run: bool = False) -> Dict[str, Any]:
        validate_version(version)

        store = MetadataStore(self.metadata_file, dry_run=dry_run)
        metadata = store.load()

        logger.info(f"Fetching SHA256 hashes for {version}...")
        metadata.update(self.update_sha256_hashes(version))

        logger.info("Generating formula...")
        renderer = FormulaRenderer(dry_run=dry_run)
        content = renderer.render(self.template_file, metadata)
        renderer.write(self.output_file, content)

        logger.info("Saving metadata...")
        store.save(metadata)

        return metadata

    def update_sha256_hashes(self, version: str) -> Dict[str, Any]:
        result: Dict[str, Any] = {"version": validate_version(version)}

        for group in self.resource_groups:
            logger.info(f"Processing {group.repository}...")

            release = self.release_client.release_for_tag(group.repository, version)

            records: Dict[str, Dict[str, str]] = {}
            for spec in group.resources:
                logger.info(f"  Processing resource: {spec.name}")

                asset = match_asset(spec.pattern, release.assets)
                logger.info(f"    Downloading from {asset.download_url}")
                content = self.fetcher.fetch(asset.download_url)

                record = build_record(asset.download_url, content)
                logger.info(f"    SHA256: {record.sha256}")
                records[spec.name] = record.to_dict()

            result[group.repository] = records

        return result

    def close(self) -> None:
        self.release_client.close()
        self.fetcher.close()
