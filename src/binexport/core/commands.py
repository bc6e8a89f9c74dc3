# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Map subcommand names to the executables installed next to the dispatcher.

A command ``foo`` is the file ``binexport-foo`` in the dispatcher's own
directory. There is no registry: whatever is installed there is a command.
"""

import os

from binexport.core.errors import NotFoundError
from binexport.version import BINEXPORT_NAME

TOOL_PREFIX = f"{BINEXPORT_NAME}-"
EXE_SUFFIX = ".exe"


def _lookup_dir(self_path: str) -> str:
    if os.path.isdir(self_path):
        return self_path
    return os.path.dirname(self_path)


def _is_executable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _candidates(lookup_dir: str, file_name: str) -> list[str]:
    path = os.path.join(lookup_dir, file_name)
    if os.name == "nt":
        return [path, path + EXE_SUFFIX]
    return [path]


def validate_command(name: str, self_path: str, prefix: str = TOOL_PREFIX) -> str:
    """Return the executable implementing ``name``, or raise NotFoundError."""
    if name:
        for candidate in _candidates(_lookup_dir(self_path), prefix + name):
            if _is_executable_file(candidate):
                return candidate
    raise NotFoundError(
        f"'{name}' is not a {BINEXPORT_NAME} command. See '{BINEXPORT_NAME} --help'."
    )


def list_commands(self_path: str, prefix: str = TOOL_PREFIX) -> list[str]:
    lookup_dir = _lookup_dir(self_path)
    try:
        entries = os.listdir(lookup_dir)
    except OSError:
        return []
    names = set()
    for entry in entries:
        if not entry.startswith(prefix):
            continue
        name = entry[len(prefix):]
        if os.name == "nt":
            if not name.lower().endswith(EXE_SUFFIX):
                continue
            name = name[:-len(EXE_SUFFIX)]
        if name and _is_executable_file(os.path.join(lookup_dir, entry)):
            names.add(name)
    return sorted(names)
