import argparse
import json
import logging
import sys

from api.client import RiotClient
from api.http import RiotApiError
from config import DEFAULT_MATCH_COUNT, DEFAULT_QUEUE, LOG_LEVEL, load_settings
from engine.profile import build_live_profile


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="2XKO duo / anchor / aggressivity lookup for a Riot ID")
    parser.add_argument("riot_id", help="Riot ID as Name#TAG")
    parser.add_argument("--count", type=int, default=DEFAULT_MATCH_COUNT)
    parser.add_argument("--queue", default=DEFAULT_QUEUE)
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    client = RiotClient(load_settings())
    try:
        payload = build_live_profile(args.riot_id, client, count=args.count, queue=args.queue or None)
    except RiotApiError as exc:
        print(json.dumps(exc.to_dict(), indent=args.indent))
        return 1

    print(json.dumps({"ok": True, **payload}, indent=args.indent, ensure_ascii=False))
    for w in payload["warnings"]:
        logging.getLogger(__name__).warning(w)
    return 0


if __name__ == "__main__":
    sys.exit(main())
