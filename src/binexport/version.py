# Copyright 2026. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__version__ = "12.0.0"

BINEXPORT_NAME = "binexport"
