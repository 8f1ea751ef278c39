"""
Command line path search.
Usage: wiki-pathfinder <from_page> <to_page> [max_depth]
"""

import asyncio
import sys
import time
from typing import List, Optional

from wiki_pathfinder.cache import LinkCache
from wiki_pathfinder.config import CacheConfig, SourceConfig
from wiki_pathfinder.exceptions import WikiPathfinderException
from wiki_pathfinder.logging_config import setup_logging
from wiki_pathfinder.search import DEFAULT_MAX_DEPTH, LinkResolver, PathFinder
from wiki_pathfinder.source import LinkSource, WikipediaLinkSource
from wiki_pathfinder.utils.wiki_helpers import get_page_identifier, validate_max_depth


def print_usage():
    """Print usage instructions."""
    print("Wiki Pathfinder")
    print("=" * 40)
    print("Usage: wiki-pathfinder <from_page> <to_page> [max_depth]")
    print("")
    print("Examples:")
    print("  wiki-pathfinder Berlin Potsdam")
    print("  wiki-pathfinder 'Albert Einstein' Physik 3")
    print("")
    print(f"max_depth defaults to {DEFAULT_MAX_DEPTH}. Links are cached in PAGE_CACHE_DB.")


async def find_and_display_path(origin: str, target: str, max_depth: int,
                                cache_config: CacheConfig, source: LinkSource) -> int:
    """Run one search and print the outcome. Returns a process exit code."""
    print(f"\nSearching for path from '{origin}' to '{target}' (depth {max_depth})...")
    start_time = time.time()

    async with LinkCache(cache_config) as cache:
        finder = PathFinder(LinkResolver(cache, source))
        try:
            result = await finder.find_path(origin, target, max_depth=max_depth)
        except WikiPathfinderException as e:
            print(f"\n{e.message} after {time.time() - start_time:.2f}s")
            return 1
        finally:
            await source.close()

    print(f"\n{result.describe()} in {time.time() - start_time:.2f}s")
    print(" -> ".join(result.path))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) not in (2, 3):
        print_usage()
        return 2

    try:
        origin = get_page_identifier(argv[0])
        target = get_page_identifier(argv[1])
        max_depth = int(argv[2]) if len(argv) == 3 else DEFAULT_MAX_DEPTH
        validate_max_depth(max_depth)
    except ValueError as e:
        print(f"Invalid arguments: {e}")
        return 2

    setup_logging(level="WARNING")
    source = WikipediaLinkSource(SourceConfig.from_env())
    return asyncio.run(find_and_display_path(origin, target, max_depth, CacheConfig.from_env(), source))


if __name__ == "__main__":
    sys.exit(main())
