"""Command line entry point for printing user records."""

import argparse
import logging

from userrecord.common import User, UserRole
from userrecord.config import configure_logging, load_config_from_env
from userrecord.rows import UserRow

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line tool."""
    parser = argparse.ArgumentParser(
        prog="userrecord",
        description="Build a user record and print it for debugging.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to the environment configuration file.",
    )
    parser.add_argument("--name", type=str, default=None, help="Display name.")
    parser.add_argument("--uid", type=int, default=None, help="User identifier.")
    parser.add_argument("--password", type=str, default=None, help="Credential.")
    parser.add_argument(
        "--google-id",
        type=str,
        default=None,
        help="Subject id from the Google identity provider.",
    )
    parser.add_argument(
        "--role",
        type=UserRole.from_storage,
        choices=list(UserRole),
        default=None,
        help="Account role.",
    )
    parser.add_argument(
        "--format",
        choices=("display", "row"),
        default="display",
        help="Print the display string or the storage parameters.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Build a user from the command line and print it."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config_from_env(args.env_file)
    configure_logging(config)

    user = User(args.name, args.uid, args.password, args.google_id, args.role)
    LOGGER.debug("Built user with uid %s", user.uid)

    if args.format == "row":
        try:
            params = user.copy_into(UserRow()).to_params()
        except ValueError as exc:
            parser.error(str(exc))
        print(params)
    else:
        print(user.to_display_string(config.display_options))


if __name__ == "__main__":
    main()
