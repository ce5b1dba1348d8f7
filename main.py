"""
Latvian Phone Crawler — CLI Entry Point

Usage:
  # Crawl every site in government_websites.json into the index
  python main.py crawl

  # Wipe the index first, use another list and a shorter timeout
  python main.py crawl --clear --sites other_sites.json --timeout 10

  # Ask the index which pages mention a number
  python main.py lookup "+371 228 119 07"

  # Launch the lookup API
  python main.py serve --port 4567
"""

import argparse
import asyncio
import json
import logging
import signal
import sys

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("phonecrawler")

EXIT_STARTUP_ERROR = 1
EXIT_INVALID_NUMBER = 2


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Latvian Phone Crawler — index phone numbers published on government websites"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # crawl command
    crawl_parser = subparsers.add_parser("crawl", help="Crawl the site list once")
    crawl_parser.add_argument(
        "--sites", type=str, default=None, help="Path to the site list JSON (default: $SITES_FILE)"
    )
    crawl_parser.add_argument(
        "--timeout", type=positive_int, default=None, help="Per-site timeout in seconds (default: 30)"
    )
    crawl_parser.add_argument(
        "--clear", action="store_true", help="Remove all stored numbers before crawling"
    )

    # lookup command
    lookup_parser = subparsers.add_parser("lookup", help="Find pages mentioning a number")
    lookup_parser.add_argument("number", help="Phone number, local or +371 form")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Launch the lookup API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=4567)

    return parser.parse_args(argv)


def _install_interrupt_handlers(cancel_event: asyncio.Event) -> None:
    """First Ctrl+C lets the current site finish, then the summary is printed."""
    loop = asyncio.get_running_loop()

    def request_stop() -> None:
        if not cancel_event.is_set():
            logger.warning("Received interrupt signal. Finishing current page and saving results...")
        cancel_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, request_stop)
        except (NotImplementedError, RuntimeError):
            # Windows event loops: KeyboardInterrupt still cancels the run
            pass


async def run_crawl(sites_path, timeout, clear: bool) -> int:
    from phonecrawler.domain.entities.crawl_summary import CrawlSummary
    from phonecrawler.domain.interfaces.i_phone_store import StoreUnavailableError
    from phonecrawler.infrastructure.config import Config
    from phonecrawler.infrastructure.container import Container
    from phonecrawler.infrastructure.site_list import SiteListError, load_sites
    from phonecrawler.use_cases.crawl_sites import CrawlSitesRequest

    try:
        config = Config.from_env()
        sites = load_sites(sites_path or config.sites_file)
    except (EnvironmentError, SiteListError) as e:
        logger.error(f"Startup failed: {e}")
        return EXIT_STARTUP_ERROR

    logging.getLogger().setLevel(config.log_level)
    container = Container(config)
    cancel_event = asyncio.Event()
    _install_interrupt_handlers(cancel_event)

    logger.info("Starting Latvian Government Website Phone Number Crawler")
    logger.info(f"Found {len(sites)} websites to crawl | store={config.store_backend}")

    summary = CrawlSummary()
    try:
        await container.crawl_use_case.execute(
            CrawlSitesRequest(
                sites=sites,
                clear_store=clear or config.clear_store,
                timeout_seconds=timeout if timeout is not None else config.crawl_timeout_seconds,
                cancel_event=cancel_event,
                summary=summary,
            )
        )
    except StoreUnavailableError as e:
        logger.error(f"Store unavailable: {e}")
        return EXIT_STARTUP_ERROR
    finally:
        print("\n" + summary.format_summary())
        await container.close()

    return 0


async def run_lookup(number: str) -> int:
    from phonecrawler.domain.entities.phone_number import InvalidPhoneNumberError
    from phonecrawler.infrastructure.config import Config
    from phonecrawler.infrastructure.container import Container
    from phonecrawler.use_cases.lookup_phone import LookupPhoneRequest

    try:
        config = Config.from_env()
    except EnvironmentError as e:
        logger.error(f"Startup failed: {e}")
        return EXIT_STARTUP_ERROR

    container = Container(config)
    try:
        response = await container.lookup_use_case.execute(LookupPhoneRequest(number=number))
    except InvalidPhoneNumberError as e:
        print(json.dumps({"error": str(e)}))
        return EXIT_INVALID_NUMBER
    finally:
        await container.close()

    print(json.dumps(response.to_dict(), indent=2))
    return 0


def launch_api(host: str, port: int) -> None:
    import uvicorn

    logger.info(f"Launching lookup API on {host}:{port}")
    uvicorn.run("main_api:app", host=host, port=port)


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.command == "crawl":
        try:
            return asyncio.run(run_crawl(args.sites, args.timeout, args.clear))
        except KeyboardInterrupt:
            return 130

    elif args.command == "lookup":
        return asyncio.run(run_lookup(args.number))

    elif args.command == "serve":
        launch_api(args.host, args.port)

    return 0


if __name__ == "__main__":
    sys.exit(main())
