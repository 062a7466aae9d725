"""Live smoke check against a running Jackett instance.

Run:
  uv run python scripts/search.py tv "Worst Cooks in America"

Notes:
- Settings are loaded from `JACKETT_*` env vars through `get_settings()`.
- The first argument picks the category set: `movie`, `tv`, `audio` or `all`.
- Set `JACKETT_REQUIRE_PARSE_NAMES=true` to see per-record parse failures.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from jackett_search.config import get_settings
from jackett_search.search.client import JackettClient
from jackett_search.shared.exceptions import JackettError, ParseError

logger = logging.getLogger("jackett_search_smoke")


async def main(kind: str, query: str) -> int:
    settings = get_settings()
    if not settings.api_key:
        logger.error("JACKETT_API_KEY is not set")
        return 2

    async with JackettClient.from_settings(settings) as client:
        searches = {
            "movie": client.movie_search,
            "tv": client.tv_search,
            "audio": client.audio_search,
            "all": client.search,
        }
        if kind not in searches:
            logger.error("unknown category set %r (expected one of %s)", kind, ", ".join(searches))
            return 2
        try:
            results = await searches[kind](query)
        except JackettError as exc:
            logger.error("search failed: %s", exc)
            return 1

    for item in results:
        if isinstance(item, ParseError):
            print(f"  [unparsed] {item.name}  ({item.reason})")
            continue
        print(f"  {item.name}  size={item.size} seeders={item.seeders} peers={item.peers}")
    logger.info("%d result(s)", len(results))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if len(sys.argv) < 3:
        print("usage: search.py {movie|tv|audio|all} QUERY...", file=sys.stderr)
        raise SystemExit(2)
    raise SystemExit(asyncio.run(main(sys.argv[1], " ".join(sys.argv[2:]))))
