"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from sitewalk.services.crawler import Crawler
from sitewalk.services.fetcher import HttpServiceFetcher
from sitewalk.services.http_service import HttpService
from sitewalk.services.link_extractor import SoupHrefExtractor
from sitewalk import config as env


# Environment variables used by the container (read via `sitewalk.config` helpers).
#
# SITEWALK_USER_AGENT (str, default: "SiteWalk/0.1")
#   User-Agent header for outbound HTTP requests.
#
# SITEWALK_HTTP_TIMEOUT (float seconds, default: 10.0)
#   Per-request timeout for connecting and reading. There is no overall run deadline.
#
# SITEWALK_LOG_LEVEL (str, default: "WARNING")
#   Root log level used by the command line. "Visiting" lines are logged at INFO.
#
# SITEWALK_SEED_URL (str | optional)
#   Seed used by the command line when none is given as argument or in a config file.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "LOG_LEVEL": env.LOG_LEVEL,
    "SEED_URL": env.SEED_URL,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for SiteWalk."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(float)
    )

    page_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    href_extractor = providers.Singleton(
        SoupHrefExtractor
    )

    # One crawler per run; the seed (and optional on_visit hook) is passed at call time.
    crawler = providers.Factory(
        Crawler,
        fetcher=page_fetcher,
        href_extractor=href_extractor,
    )
