# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
import time

_TRUTHY = {"1", "true", "yes", "y"}


def now_millis() -> int:
    """Current Unix time in integer milliseconds."""
    return int(time.time() * 1000)


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def env_str(*names: str) -> str:
    """Return the first non-empty value among env vars, else ''."""
    for n in names:
        v = os.getenv(n)
        if v:
            return v
    return ""
