"""
Command line entry point: crawl a forum and print its sitemap.
"""
import argparse
import sys
from typing import List, Optional

from .container import get_service_builder
from .errors import CrawlError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forum-sitemap",
        description="Crawl a forum's listing pages and emit a sitemap",
    )
    parser.add_argument("root_url", nargs="?", default=None,
                        help="Site root URL (default: SITEMAP_ROOT_URL or built-in)")
    parser.add_argument("-o", "--output", dest="output_path", default=None,
                        help="Write the sitemap to this file instead of stdout")
    parser.add_argument("--max-pages", type=int, default=None,
                        help="Upper bound on pages per listing category")
    parser.add_argument("--timeout", type=float, default=None,
                        help="HTTP timeout in seconds")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Diagnostic verbosity on stderr")
    parser.add_argument("--logger", dest="logger_type", default="console",
                        choices=["console", "standard"],
                        help="Logging backend")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    builder = get_service_builder(args.logger_type)

    try:
        services = builder.build_sitemap_workflow(
            root_url=args.root_url,
            output_path=args.output_path,
            max_pages=args.max_pages,
            timeout=args.timeout,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    config = services['config']
    logger = services['logger']
    fetcher = services['fetcher']

    try:
        entries = services['orchestrator'].crawl()
    except CrawlError as e:
        logger.error(str(e))
        return 1
    finally:
        fetcher.close()

    xml_content = services['serializer'].transform(entries)

    if config.output_path:
        builder.container.get_local_storage(logger=logger).store(xml_content, config.output_path)
    else:
        sys.stdout.write(xml_content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
