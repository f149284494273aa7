# =============================================================================
# askai/cli/ask.py -- Ask from the terminal
# =============================================================================
#
# Runs the same fan-out as POST /ask without starting the web server.
#
# Typical usage:
#   python -m askai.cli "What is retrieval-augmented generation?"
#   python -m askai.cli "Summarise RFC 9110" --providers groq,gemini
#   python -m askai.cli "Hello" --json
#   python -m askai.cli --list
#
# Logs go to stderr (WARNING+ unless --verbose) so stdout carries only
# the answers.
# =============================================================================

"""Command-line front end for the Ask-AI fan-out."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

import httpx

from askai.config.loader import load_config, resolve_provider_specs
from askai.config.provider_catalog import PROVIDER_CATALOG
from askai.config.settings import Settings
from askai.models.query import AggregateResponse
from askai.services.aggregator import QueryAggregator
from askai.services.provider_registry import ProviderRegistry
from askai.utils.errors import AskAIError
from askai.utils.logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="askai",
        description="Send one prompt to several LLM providers and print every answer.",
    )
    parser.add_argument("prompt", nargs="?", default="", help="Prompt text ('-' reads stdin).")
    parser.add_argument(
        "-p",
        "--providers",
        default="",
        help="Comma-separated provider ids (default: all registered providers).",
    )
    parser.add_argument("--json", action="store_true", help="Print the response as JSON.")
    parser.add_argument("--list", action="store_true", help="List providers and exit.")
    parser.add_argument("--config", default=None, help="Path to config.yaml.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at INFO to stderr.")
    return parser


def _split_providers(raw: str) -> list[str] | None:
    ids = [part.strip() for part in raw.split(",") if part.strip()]
    return ids or None


def format_text(response: AggregateResponse) -> str:
    """Render a response as a human-readable block per provider."""
    lines: list[str] = []
    for answer in response.answers:
        lines.append(f"=== {answer.provider} ===")
        lines.append(answer.text)
        lines.append("")
    if not response.answers:
        lines.append("(no matching providers)")
    return "\n".join(lines).rstrip() + "\n"


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the parsed command.  Returns the process exit code."""
    config = load_config(path=args.config, settings=settings)
    specs = resolve_provider_specs(PROVIDER_CATALOG, config)

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        registry = ProviderRegistry.from_specs(specs, settings, client)

        if args.list:
            for info in registry.describe_all():
                state = "enabled" if info["enabled"] else "no key"
                print(f"{info['id']:<24} {info['name']:<18} {info['group']:<11} {state}")
            return 0

        prompt = sys.stdin.read() if args.prompt == "-" else args.prompt
        aggregator = QueryAggregator(
            registry,
            max_prompt_chars=settings.max_prompt_chars,
            reject_empty_prompt=settings.reject_empty_prompt,
            max_concurrent_calls=settings.max_concurrent_calls,
        )
        response = await aggregator.aggregate(prompt, _split_providers(args.providers))

    if args.json:
        print(json.dumps(response.model_dump(), indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(format_text(response))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(log_level="INFO" if args.verbose else "WARNING", stream=sys.stderr)
    try:
        return asyncio.run(run(args, Settings()))
    except AskAIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
