# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .models.outcome import SimulationOutcome


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    RPC_ERROR = "RPC_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class ValidatorError(Exception):
    """Base class for every error raised by the validator."""


class InvalidArguments(ValidatorError, ValueError):
    """A required probe input is missing or malformed."""


class UnknownCase(ValidatorError, LookupError):
    """The (category, case id) pair is not registered."""

    def __init__(self, category: object, case_id: object = None):
        self.category = category
        self.case_id = case_id
        if case_id is None:
            super().__init__(f"Unknown case category: {category}")
        else:
            super().__init__(f"Unknown {category} case: {case_id}")


class ArtifactError(ValidatorError):
    """A probe artifact is missing or cannot be used."""


class ClassificationError(ValidatorError):
    """
    The simulation failed in a way that is not a recognized revert.

    Never treat this as proof of non-compliance: it usually means the node,
    the transport or the probe setup is broken.
    """

    def __init__(self, outcome: SimulationOutcome, message: str | None = None):
        self.outcome = outcome
        self.category = outcome.error_category or ErrorCategory.UNKNOWN_ERROR
        reason = error_category_to_reason(self.category)
        detail = outcome.error_message or "no error message"
        super().__init__(message or f"{reason}: {detail}")


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during probe simulation",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.RPC_ERROR: "Node rejected the simulation",
        ErrorCategory.UNKNOWN_ERROR: "Unclassified error during probe simulation",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe simulation failed")


__all__ = [
    "ArtifactError",
    "ClassificationError",
    "ErrorCategory",
    "InvalidArguments",
    "UnknownCase",
    "ValidatorError",
    "categorize_exception",
    "error_category_to_reason",
]
