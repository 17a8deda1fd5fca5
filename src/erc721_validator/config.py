# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for the ERC-721 validator."""

import os
from dataclasses import dataclass, field

from .version import __version__

DEFAULT_USER_AGENT = f"ERC721Validator/{__version__}"
DEFAULT_RPC_URL = "http://127.0.0.1:8545"
# Covers the giver's one-token sale price.
DEFAULT_TRANSFER_VALUE = 1_000_000


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _list_env(name: str) -> tuple[str, ...]:
    value = os.getenv(name)
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass
class NetworkSettings:
    """JSON-RPC client defaults."""

    rpc_url: str = DEFAULT_RPC_URL
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "NetworkSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("ERC721_VALIDATOR_RPC_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            rpc_url=os.getenv("ERC721_VALIDATOR_RPC_URL", cls.rpc_url),
            timeout=timeout,
            verify_ssl=_bool_env("ERC721_VALIDATOR_VERIFY_SSL", cls.verify_ssl),
            user_agent=os.getenv("ERC721_VALIDATOR_USER_AGENT", cls.user_agent),
        )


@dataclass
class ProbeSettings:
    """Probe deployment defaults."""

    funded_address: str | None = None
    transfer_value: int = DEFAULT_TRANSFER_VALUE
    artifacts_dir: str = "artifacts"
    artifacts_version: str = "v1"
    extra_revert_signatures: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        transfer_value = _int_env("ERC721_VALIDATOR_TRANSFER_VALUE", cls.transfer_value)
        if transfer_value < 0:
            transfer_value = cls.transfer_value
        return cls(
            funded_address=os.getenv("ERC721_VALIDATOR_FUNDED_ADDRESS") or None,
            transfer_value=transfer_value,
            artifacts_dir=os.getenv("ERC721_VALIDATOR_ARTIFACTS_DIR", cls.artifacts_dir),
            artifacts_version=os.getenv("ERC721_VALIDATOR_ARTIFACTS_VERSION", cls.artifacts_version),
            extra_revert_signatures=_list_env("ERC721_VALIDATOR_REVERT_SIGNATURES"),
        )


def load_network_settings() -> NetworkSettings:
    """Load network settings from environment with sensible defaults."""
    return NetworkSettings.from_env()


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
