#!/usr/bin/env python3
import asyncio
import argparse
from pathlib import Path
from typing import Optional

from config import LOG_NAME
from logger import setup_logger
import source

COMMANDS = {
    "search": source.search_results,
    "details": source.extract_details,
    "episodes": source.extract_episodes,
    "stream": source.extract_stream_url,
}


def main(command: str, arg: str = "", log_file: Optional[Path] = None) -> str:
    setup_logger(LOG_NAME, log_file)

    if command == "trending":
        result = asyncio.run(source.fetch_trending())
    else:
        result = asyncio.run(COMMANDS[command](arg))

    return "null" if result is None else result


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="hanime.tv content source")
    parser.add_argument(
        "command",
        choices=["search", "trending", "details", "episodes", "stream"],
    )
    parser.add_argument(
        "arg",
        nargs="?",
        default="",
        help="Тег для search або URL відео для details/episodes/stream",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Файл для DEBUG-логу",
    )

    args = parser.parse_args()
    if args.command not in ("trending", "search") and not args.arg:
        parser.error(f"{args.command} requires a video URL")
    print(main(args.command, args.arg, log_file=args.log_file))
