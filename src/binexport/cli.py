# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Entry point for BinExport command-line utilities.

``binexport [flags] <command> [args...]`` runs the ``binexport-<command>``
executable installed next to this one and exits with its status.
"""

import argparse
import sys
from typing import Callable

from binexport.core.args import (
    UsageConfig,
    build_flag_parser,
    find_split_point,
    is_help_flag,
    parse_dispatcher_flags,
)
from binexport.core.commands import list_commands, validate_command
from binexport.core.errors import DispatchError, InvalidArgumentError
from binexport.core.logging import log_activity
from binexport.core.process import build_child_args, spawn_and_wait
from binexport.core.selfpath import SelfPathResolver, default_resolver

NO_COMMAND_MESSAGE = "No command given. Try '--help'."
EXIT_INTERRUPTED = 130


class Dispatcher:
    """Split argv, find the subcommand executable and run it.

    Each step either succeeds or raises a DispatchError; nothing is retried.
    """

    def __init__(self, config: UsageConfig, resolver: SelfPathResolver | None = None,
                 launcher: Callable[[list[str]], int] = spawn_and_wait):
        self.config = config
        self.resolver = resolver or default_resolver()
        self.launcher = launcher
        self._parser = build_flag_parser(config)

    def run(self, args: list[str]) -> int:
        split = find_split_point(args)
        # A help flag at the split point belongs to the dispatcher's parser.
        end = split + 1 if split < len(args) and is_help_flag(args[split]) else split
        opts, unknown = parse_dispatcher_flags(self._parser, args[1:end])
        try:
            return self._dispatch(args, split, opts, unknown)
        except DispatchError as e:
            log_activity(opts.log_file, f"ERROR: {e}")
            raise

    def _dispatch(self, args: list[str], split: int, opts: argparse.Namespace,
                  unknown: list[str]) -> int:
        if unknown:
            # An unknown flag without a command reports the missing command.
            if split == len(args):
                raise InvalidArgumentError(NO_COMMAND_MESSAGE)
            self._parser.error(f"unrecognized arguments: {' '.join(unknown)}")

        if opts.list:
            for name in list_commands(self.resolver.resolve_self_path()):
                print(name)
            return 0

        if split == len(args):
            raise InvalidArgumentError(NO_COMMAND_MESSAGE)

        name = args[split]
        command_exe = validate_command(name, self.resolver.resolve_self_path())
        if opts.verbose:
            print(f"found command: {command_exe}", file=sys.stderr)
        log_activity(opts.log_file, f"dispatch {name} -> {command_exe}")

        status = self.launcher(build_child_args(command_exe, args[split + 1:]))
        log_activity(opts.log_file, f"exit {status}")
        return status


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv if argv is None else argv)
    dispatcher = Dispatcher(UsageConfig())
    try:
        return dispatcher.run(args)
    except DispatchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
