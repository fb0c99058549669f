import asyncio
import json
import sys
import argparse
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from azinews.feed.aggregator import FeedAggregator, merge_source_results
from azinews.feed.model import SourceResult
from azinews.news.source.registry import NewsSourceRegistry
from azinews.logging_config import logger


def setup_argparser():
    """Set up command line argument parser."""
    parser = argparse.ArgumentParser(description="AziNews CLI for aggregating news feeds")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("list-sources", help="List the configured news sources")

    refresh_parser = subparsers.add_parser("refresh", help="Fetch the latest news from the configured sources")
    refresh_parser.add_argument("--source", action="append", dest="sources", metavar="NAME",
                                help="Only fetch this source (repeatable); defaults to all sources")
    refresh_parser.add_argument("--json", action="store_true", help="Print the news items as JSON")
    refresh_parser.add_argument("--timeout", type=float, default=None, help="Per-source fetch timeout in seconds")

    return parser


def list_sources() -> List[Dict[str, Any]]:
    sources = NewsSourceRegistry.get_all_sources()
    for source in sources:
        print(f"{source.name}: {source.endpoint}")
        if source.description:
            print(f"  {source.description}")
    return [source.model_dump() for source in sources]


async def refresh(source_names: Optional[List[str]] = None, timeout_seconds: Optional[float] = None) -> Dict[str, Any]:
    """Run one aggregation and summarize it per source."""
    sources = NewsSourceRegistry.select_sources(source_names) if source_names else NewsSourceRegistry.get_all_sources()

    results: List[SourceResult] = await FeedAggregator(timeout_seconds=timeout_seconds).collect(sources)

    return {
        "items": [asdict(item) for item in merge_source_results(results)],
        "successful_sources": [
            {"source": result.source.name, "items": len(result.items)}
            for result in results if result.ok
        ],
        "failed_sources": [
            {"source": result.source.name, "error": str(result.error)}
            for result in results if not result.ok
        ],
    }


def print_refresh_result(result: Dict[str, Any], as_json: bool = False):
    if as_json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return

    if not result["items"]:
        print("No news items available")

    for item in result["items"]:
        print(f"[{item['source']}] {item['title']}")
        if item["description"]:
            print(f"  {item['description']}")
        if item["link"]:
            print(f"  {item['link']}")
        if item["image_url"]:
            print(f"  image: {item['image_url']}")

    if result["successful_sources"]:
        print(f"\n✅ Successful sources:")
        for source in result["successful_sources"]:
            print(f"  - {source['source']} ({source['items']} items)")

    if result["failed_sources"]:
        print(f"\n❌ Failed sources:")
        for source in result["failed_sources"]:
            print(f"  - {source['source']} - Error: {source['error']}")


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = setup_argparser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "list-sources":
        list_sources()

    elif args.command == "refresh":
        try:
            result = asyncio.run(refresh(args.sources, args.timeout))
        except ValueError as e:
            parser.error(str(e))

        logger.debug(f"Refresh completed with {len(result['items'])} items, {len(result['failed_sources'])} failed sources")
        print_refresh_result(result, as_json=args.json)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
