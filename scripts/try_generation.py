#!/usr/bin/env python3
"""
Helper script to run one email generation from the command line.

Safe utility for checking credentials and model availability.
Uses the same environment configuration as the API (GEMINI_API_KEY,
GEMINI_MODELS, LLM_BACKEND, ...). Backend attempts are logged, then the
rendered message is printed.

Usage:
    python scripts/try_generation.py "announce the new streak reminders" [--user Ada] [--json]
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from composer import GenerationRequest, PromptValidationError, TemplateVariables  # noqa: E402
from infra import get_config  # noqa: E402


async def run(prompt: str, user: str = None, as_json: bool = False) -> int:
    """
    Run one generation with the environment configuration.

    Args:
        prompt: Free-text request
        user: Optional recipient name for {user}
        as_json: Print the rendered message as JSON only

    Returns:
        Process exit code
    """
    generator = get_config().create_generator()
    request = GenerationRequest(prompt=prompt, variables=TemplateVariables(user=user))

    if not as_json:
        orchestrator = generator.orchestrator
        print(f"Backends: {', '.join(orchestrator.backend_names) or '(none)'}")
        print(f"Configured: {'✓' if orchestrator.is_configured else '✗'}")
        print("-" * 70)

    try:
        message = await generator.generate(request)
    except PromptValidationError as e:
        print(f"✗ {e}")
        return 2

    if as_json:
        print(json.dumps(message.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False))
        return 0

    print("-" * 70)
    print(f"Source:  {message.source} ({message.backend_used or message.template_name})")
    if message.warning:
        print(f"Warning: {message.warning}")
    print(f"Subject: {message.subject}")
    print()
    print(message.body)
    return 0


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Generate one email through the backend cascade"
    )
    parser.add_argument("prompt", help="Description of the email to write")
    parser.add_argument("--user", default=None, help="Recipient name for {user}")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print only the rendered message as JSON",
    )

    args = parser.parse_args()
    sys.exit(asyncio.run(run(args.prompt, user=args.user, as_json=args.json)))


if __name__ == "__main__":
    main()
