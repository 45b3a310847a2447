"""Entry point for hexdeck CLI."""

import sys

from hexdeck.cli import build_parser
from hexdeck.cli._common import configure_logging
from hexdeck.config import read_config


def main():
    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(args.verbose, read_config()["log_level"])
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
