# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for the ERC-721 validator."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("ERC721_VALIDATOR_LOG_LEVEL", "WARNING").upper()

# Transport libraries log every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, effective_level, logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    transport_level = logging.NOTSET if numeric_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["setup_logging"]
