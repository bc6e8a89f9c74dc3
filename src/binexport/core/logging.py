# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

# Activity log for dispatches. Disabled unless --log-file= is given.

from datetime import datetime, timezone

DEFAULT_SOURCE = "binexport"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%H:%M:%S")


def format_activity(source: str, message: str, ts: str | None = None) -> str:
    ts = ts or utc_timestamp()
    return f"[{ts}] {source}  {message}\n" if source else f"[{ts}] {message}\n"


def log_activity(log_path: str, message: str, source: str = DEFAULT_SOURCE) -> None:
    """Append one timestamped line to ``log_path``; no-op when it is empty.

    A log that cannot be written never fails the dispatch.
    """
    if not log_path:
        return
    try:
        with open(log_path, "a") as f:
            f.write(format_activity(source, message))
    except OSError:
        pass
