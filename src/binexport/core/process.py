# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

# Spawn a subcommand and wait for it.

import signal
import subprocess

from binexport.core.errors import SpawnError


def build_child_args(exe: str, tail: list[str]) -> list[str]:
    return [exe, *tail]


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)


def spawn_and_wait(argv: list[str]) -> int:
    """Run ``argv`` with the dispatcher's stdio and return its exit status.

    ``argv[0]`` is the executable. Raises SpawnError when the process cannot
    be started or is killed by a signal.
    """
    exe = argv[0]
    try:
        proc = subprocess.Popen(argv)
    except OSError as e:
        raise SpawnError(f"Failed to run '{exe}': {e.strerror or e}") from e

    with proc:
        while True:
            try:
                returncode = proc.wait()
                break
            except KeyboardInterrupt:
                # The terminal sent SIGINT to the child as well; its exit
                # status decides the outcome.
                continue

    if returncode < 0:
        raise SpawnError(f"'{exe}' was terminated by signal {_signal_name(-returncode)}")
    return returncode
