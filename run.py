import logging
import sys

import click

from sitewalk.config_file_store import load_crawl_config
from sitewalk.container import Container
from sitewalk.exceptions import CrawlConfigError, InvalidSeedUrlError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def print_error(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


def init_logging(level: str) -> None:
    level = (level or "WARNING").strip().upper()
    if level not in LOG_LEVELS:
        level = "WARNING"
    logging.basicConfig(level=level, format=LOG_FORMAT)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("seed_url", required=False)
@click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML crawl config with seed_url and optional user_agent/http_timeout.",
)
@click.option("--user-agent", "user_agent", default=None, help="User-Agent header for requests.")
@click.option("--timeout", "timeout", type=float, default=None, help="Per-request timeout in seconds.")
@click.option(
    "--log-level", "log_level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level (default from SITEWALK_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx, seed_url, config_path, user_agent, timeout, log_level):
    """Crawl every same-domain page reachable from SEED_URL."""
    # Tests inject a pre-configured container through ctx.obj.
    container = (ctx.obj or {}).get("container") or Container()
    init_logging(log_level or container.config.LOG_LEVEL())

    file_cfg = None
    if config_path:
        try:
            file_cfg = load_crawl_config(config_path)
        except CrawlConfigError as e:
            print_error(f"Error loading config: {e}")

    seed = seed_url or (file_cfg.seed_url if file_cfg else None) or container.config.SEED_URL()
    if not seed:
        print_error("No seed URL given (argument, --config file or SITEWALK_SEED_URL)")

    ua = user_agent or (file_cfg.user_agent if file_cfg else None)
    if ua:
        container.config.USER_AGENT.from_value(ua)
    if timeout is None and file_cfg is not None:
        timeout = file_cfg.http_timeout
    if timeout is not None:
        container.config.HTTP_TIMEOUT.from_value(timeout)

    try:
        crawler = container.crawler(seed, on_visit=lambda url: click.echo(f"Visiting: {url}"))
    except InvalidSeedUrlError as e:
        print_error(f"Error creating crawler: {e}")

    crawler.crawl()

    result = crawler.result()
    click.echo(
        f"Crawl finished: {result.pages_visited} visited, "
        f"{len(result.failed)} failed, {len(result.non_ok)} non-OK"
    )


if __name__ == '__main__':
    cli()
