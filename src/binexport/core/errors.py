# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for the command dispatcher.

Every step of a dispatch raises one of these; nothing in the core recovers
from them. ``binexport.cli.main`` turns any of them into a single
``ERROR: <message>`` line and a non-zero exit status.
"""


class DispatchError(Exception):
    """Base class for all user-facing dispatcher failures."""


class InvalidArgumentError(DispatchError):
    """No subcommand was given on the command line."""


class NotFoundError(DispatchError):
    """The subcommand name does not map to an installed executable."""


class ResolutionError(DispatchError):
    """The dispatcher could not determine its own executable path."""


class SpawnError(DispatchError):
    """The child process could not be started or terminated abnormally."""
