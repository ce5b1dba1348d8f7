"""
Site list loader. The list is a JSON array of {"name": ..., "url": ...}.
Anything else is a fatal startup error: the crawler must not run on a
partial or empty configuration.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from ..domain.entities.crawl_site import CrawlSite

logger = logging.getLogger(__name__)


class SiteListError(Exception):
    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        super().__init__(message)


def load_sites(path: Union[str, Path]) -> List[CrawlSite]:
    path = Path(path)
    if not path.is_file():
        raise SiteListError(f"{path} not found", path=str(path))

    try:
        rows = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SiteListError(f"Error parsing {path}: {e}", path=str(path)) from e

    if not isinstance(rows, list):
        raise SiteListError(
            f"{path} must contain a JSON array of sites, got {type(rows).__name__}",
            path=str(path),
        )
    if not rows:
        raise SiteListError(f"{path} contains no sites", path=str(path))

    sites = []
    for idx, row in enumerate(rows):
        try:
            sites.append(CrawlSite.from_dict(row))
        except ValueError as e:
            raise SiteListError(f"{path} entry #{idx + 1}: {e}", path=str(path)) from e

    logger.info(f"Loaded {len(sites)} site(s) from {path}")
    return sites
