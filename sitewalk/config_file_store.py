import os
from dataclasses import dataclass
from typing import Optional

import yaml

from sitewalk.exceptions import CrawlConfigError


@dataclass(frozen=True)
class CrawlConfigFile:
    """Settings read from a crawl YAML file.

    Only `seed_url` is required; the rest fall back to environment defaults.
    """

    seed_url: str
    user_agent: Optional[str] = None
    http_timeout: Optional[float] = None


def load_yaml_dict(config_path: str) -> Optional[dict]:
    """Return parsed YAML dict for `config_path`, or None if missing/invalid."""
    if not os.path.isfile(config_path):
        return None
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return None
    return data if isinstance(data, dict) else None


def load_crawl_config(config_path: str) -> CrawlConfigFile:
    """Load a crawl config file.

    Example::

        seed_url: https://example.com/
        user_agent: MyBot/1.0
        http_timeout: 5
    """
    if not os.path.isfile(config_path):
        raise CrawlConfigError(config_path)
    data = load_yaml_dict(config_path)
    if data is None:
        raise CrawlConfigError(config_path, "is not a YAML mapping")

    seed_url = data.get("seed_url")
    if not seed_url or not isinstance(seed_url, str):
        raise CrawlConfigError(config_path, "has no seed_url")

    timeout = data.get("http_timeout")
    if timeout is not None:
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise CrawlConfigError(config_path, f"has invalid http_timeout: {timeout!r}")

    user_agent = data.get("user_agent")
    return CrawlConfigFile(
        seed_url=seed_url.strip(),
        user_agent=str(user_agent) if user_agent else None,
        http_timeout=timeout,
    )
