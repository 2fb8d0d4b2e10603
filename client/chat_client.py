"""Simple HTTP client for manual testing of the chat endpoint."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import pathlib
import time
from typing import Any

import httpx

DEFAULT_URL = "http://127.0.0.1:8000/api/chat"


async def run_client(
    url: str,
    message: str,
    history_file: pathlib.Path | None,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Send one message to the chat service and print the reply."""

    logger = logging.getLogger("chat_client")
    payload: dict[str, Any] = {"message": message}
    if history_file:
        payload["history"] = json.loads(history_file.read_text(encoding="utf-8"))

    start = time.perf_counter()
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.post(url, json=payload)
        logger.info("Sent message (%d chars)", len(message))

    elapsed = time.perf_counter() - start
    if response.status_code != 200:
        logger.error("Request rejected (%d): %s", response.status_code, response.text)
        raise SystemExit(1)

    logger.info("Received reply in %.2fs", elapsed)
    print(response.json()["reply"])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test client for the AyurSutra chat service.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Chat endpoint URL (default: %(default)s)")
    parser.add_argument("--message", required=True, help="Question to ask.")
    parser.add_argument(
        "--history",
        type=pathlib.Path,
        help="Optional JSON file with a list of {role, content} turns.",
    )
    parser.add_argument(
        "--timeout", type=float, default=30.0, help="Seconds to wait for the reply."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        asyncio.run(run_client(args.url, args.message, args.history, args.timeout))
    except KeyboardInterrupt:  # pragma: no cover - manual usage only
        pass


if __name__ == "__main__":  # pragma: no cover
    main()
