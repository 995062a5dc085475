"""Simple HTTP client for manual testing."""

from __future__ import annotations

import argparse
import logging
import sys
import time

import httpx

DEFAULT_URL = "http://127.0.0.1:8000/"


def run_client(url: str, topic: str, timeout: float) -> list[str]:
    """Post ``topic`` to the service and return the ideas it sends back."""

    logger = logging.getLogger("ideas_client")
    start = time.perf_counter()

    response = httpx.post(url, json={"topic": topic}, timeout=timeout)
    logger.info("Sent topic (%d chars)", len(topic))

    if response.status_code != httpx.codes.OK:
        logger.error("Received error response %d: %s", response.status_code, response.text)
        raise SystemExit(1)

    ideas = response.json()["ideas"]
    elapsed = time.perf_counter() - start
    logger.info("Received %d ideas in %.2fs", len(ideas), elapsed)
    return ideas


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test client for the topic ideas service.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Service URL (default: %(default)s)")
    parser.add_argument("--topic", required=True, help="Topic to brainstorm.")
    parser.add_argument(
        "--timeout", type=float, default=30.0, help="Seconds to wait for the ideas."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    for idea in run_client(args.url, args.topic, args.timeout):
        sys.stdout.write(f"{idea}\n")


if __name__ == "__main__":  # pragma: no cover
    main()
