# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Versioned probe artifacts.

Compiled probe contracts are data, not logic: each one lives in
``<root>/<version>/<name>.json`` with an ``abi`` list and a ``bytecode`` (or
solc's ``bin``) hex string. Swapping a version is a configuration change.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from eth_abi import encode, is_encodable_type
from eth_abi.exceptions import EncodingError
from eth_utils import add_0x_prefix, event_abi_to_log_topic, encode_hex, is_hex, remove_0x_prefix

from .config import ProbeSettings, load_probe_settings
from .errors import ArtifactError, InvalidArguments

PROBE_ARTIFACTS = ("basic", "token", "transfer")
STUB_ARTIFACTS = ("giver", "receiver", "receiver_wrong_magic", "receiver_reverting", "non_receiver")


@dataclass(frozen=True)
class ProbeArtifact:
    name: str
    version: str
    abi: list[dict[str, Any]]
    bytecode: str

    @property
    def constructor_types(self) -> list[str]:
        for item in self.abi:
            if item.get("type") == "constructor":
                return [str(inp.get("type")) for inp in item.get("inputs") or []]
        return []

    def deployment_data(self, arguments: Sequence[Any]) -> str:
        """Bytecode followed by the ABI-encoded constructor arguments."""
        types = self.constructor_types
        if len(types) != len(arguments):
            raise ArtifactError(
                f"Artifact {self.name}@{self.version} expects {len(types)} constructor arguments, got {len(arguments)}"
            )
        try:
            encoded = encode(types, list(arguments))
        except EncodingError as exc:
            raise InvalidArguments(f"Cannot encode arguments for {self.name}: {exc}") from exc
        return add_0x_prefix(remove_0x_prefix(self.bytecode) + encoded.hex())

    def event_topics(self) -> dict[str, str]:
        topics: dict[str, str] = {}
        for item in self.abi:
            if item.get("type") == "event":
                topics[str(item.get("name"))] = encode_hex(event_abi_to_log_topic(item))
        return topics

    def abi_with_signatures(self) -> list[dict[str, Any]]:
        """ABI entries with ``signature`` set on events."""
        topics = self.event_topics()
        entries: list[dict[str, Any]] = []
        for item in self.abi:
            entry = dict(item)
            if entry.get("type") == "event" and entry.get("name") in topics:
                entry["signature"] = topics[entry["name"]]
            entries.append(entry)
        return entries


def _parse_artifact(name: str, version: str, data: Any) -> ProbeArtifact:
    if not isinstance(data, dict):
        raise ArtifactError(f"Artifact {name}@{version} must be a JSON object")
    abi = data.get("abi")
    if isinstance(abi, str):
        try:
            abi = json.loads(abi)
        except json.JSONDecodeError as exc:
            raise ArtifactError(f"Artifact {name}@{version} has an unreadable abi") from exc
    if not isinstance(abi, list):
        raise ArtifactError(f"Artifact {name}@{version} has no abi list")
    bytecode = data.get("bytecode") or data.get("bin")
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object")
    if not isinstance(bytecode, str) or not bytecode or not is_hex(bytecode):
        raise ArtifactError(f"Artifact {name}@{version} has no hex bytecode")
    artifact = ProbeArtifact(name=name, version=version, abi=abi, bytecode=add_0x_prefix(bytecode))
    for type_str in artifact.constructor_types:
        if not is_encodable_type(type_str):
            raise ArtifactError(f"Artifact {name}@{version} has an unsupported constructor type: {type_str!r}")
    return artifact


class ArtifactStore:
    """Loads and caches probe artifacts for one version."""

    def __init__(self, root: str | Path, version: str = "v1"):
        self.root = Path(root)
        self.version = version
        self._cache: dict[str, ProbeArtifact] = {}

    @classmethod
    def from_settings(cls, settings: ProbeSettings | None = None) -> ArtifactStore:
        settings = settings or load_probe_settings()
        return cls(settings.artifacts_dir, settings.artifacts_version)

    def path_for(self, name: str) -> Path:
        return self.root / self.version / f"{name}.json"

    def get(self, name: str) -> ProbeArtifact:
        cached = self._cache.get(name)
        if cached is not None:
            return cached
        path = self.path_for(name)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ArtifactError(f"Probe artifact not found: {path}") from None
        except (OSError, json.JSONDecodeError) as exc:
            raise ArtifactError(f"Cannot read probe artifact {path}: {exc}") from exc
        artifact = _parse_artifact(name, self.version, data)
        self._cache[name] = artifact
        return artifact

    def available(self) -> list[str]:
        directory = self.root / self.version
        if not directory.is_dir():
            return []
        return sorted(path.stem for path in directory.glob("*.json"))


__all__ = ["PROBE_ARTIFACTS", "STUB_ARTIFACTS", "ArtifactStore", "ProbeArtifact"]
