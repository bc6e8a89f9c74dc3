# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Dispatcher-level argument handling.

The raw argv is split before argparse ever sees it: argparse exits on unknown
flags and would happily consume flags meant for the subcommand. Only the
tokens in front of the subcommand name reach the dispatcher's parser.
"""

import argparse
from dataclasses import dataclass

from binexport.core.commands import TOOL_PREFIX
from binexport.version import BINEXPORT_NAME, __version__

HELP_PREFIXES = ("-help", "--help")


def is_help_flag(token: str) -> bool:
    """True for ``-help``/``--help`` and longer variants like ``--helpfull``."""
    return token.startswith(HELP_PREFIXES)


def find_split_point(args: list[str]) -> int:
    """Return the index of the first non-flag argument, or ``len(args)``.

    ``args[0]`` is the program name. A help flag stops the scan at its own
    index so that it is handled by the dispatcher rather than looked up as a
    command.
    """
    for i in range(1, len(args)):
        arg = args[i]
        if is_help_flag(arg):
            return i
        if not arg.startswith("-"):
            return i
    return len(args)


@dataclass(frozen=True)
class UsageConfig:
    prog: str = BINEXPORT_NAME
    usage_message: str = "Create/work with exported disassembly files."
    version_string: str = f"{BINEXPORT_NAME} {__version__}"


def build_flag_parser(config: UsageConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.prog,
        usage="%(prog)s [flags] <command> [args...]",
        description=config.usage_message,
        epilog=(
            f"Commands are the '{TOOL_PREFIX}<command>' executables installed "
            f"next to {config.prog}. Flags taking a value must be written as "
            "--flag=value."
        ),
    )
    parser.add_argument("--version", action="version", version=config.version_string)
    parser.add_argument("--list", action="store_true", help="List available commands and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print the resolved command before running it")
    parser.add_argument("--log-file", default="", metavar="PATH",
                        help="Append dispatch activity to PATH")
    return parser


def parse_dispatcher_flags(parser: argparse.ArgumentParser,
                           flags: list[str]) -> tuple[argparse.Namespace, list[str]]:
    """Parse the dispatcher's own flags, returning the options and unknown flags.

    Exits on --help and --version. Unknown flags are left to the caller.
    """
    return parser.parse_known_args(["--help" if is_help_flag(f) else f for f in flags])
