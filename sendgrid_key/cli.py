#!/usr/bin/env python3
"""
CLI script to create a SendGrid API key with the fixed mail scopes.

Usage:
    SENDGRID_API_KEY=<admin key> create-sendgrid-key "New API Key Name"

Only the new key is printed to stdout, so the output can be captured directly:
    NEW_KEY=$(create-sendgrid-key "Staging mailer")
"""

import argparse
import logging
import sys

import httpx

from sendgrid_key.config import get_settings
from sendgrid_key.sendgrid_client import SendGridAPIError, SendGridClient

logger = logging.getLogger(__name__)

OPTION_STRINGS = ("-h", "--help", "-v", "--verbose")


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="create-sendgrid-key",
        description="Create a SendGrid API key with the predefined mail scopes"
    )
    parser.add_argument(
        "name",
        help="Name of the new API key (e.g., 'Staging mailer')"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log request details to stderr"
    )
    return parser


def split_name(argv: list[str]) -> list[str]:
    """
    Reorders argv so the key name is passed after "--".

    The first argument that is not one of OPTION_STRINGS is the key name, even
    when it starts with a dash. A leading "--" forces the next argument to be
    the name, which is how a key literally named "-v" is created.
    """
    for i, arg in enumerate(argv):
        if arg == "--":
            return argv[:i] + argv[i + 2:] + ["--"] + argv[i + 1:i + 2]
        if arg not in OPTION_STRINGS:
            return argv[:i] + argv[i + 1:] + ["--", arg]
    return argv


def main(argv: list[str] | None = None, transport: httpx.BaseTransport | None = None):
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(split_name(argv))

    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if not settings.sendgrid_api_key:
        print("Error: SENDGRID_API_KEY environment variable not set.", file=sys.stderr)
        sys.exit(1)

    client = SendGridClient(settings.sendgrid_api_key, transport=transport)

    try:
        result = client.create_api_key(args.name)
    except SendGridAPIError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        if e.status_code is not None:
            print(f"Status Code: {e.status_code}", file=sys.stderr)
        if e.body is not None:
            print(f"Response Body: {e.body}", file=sys.stderr)
        sys.exit(1)

    print(result.api_key)


if __name__ == "__main__":
    main()
