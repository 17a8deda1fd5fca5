# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Registry of every probe case, keyed by category and case id."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..errors import UnknownCase
from ..models.probe import ProbeCategory, ProbeDefinition, ProbeExpectation

_SUCCEEDS = ProbeExpectation.SUCCEEDS
_REVERTS = ProbeExpectation.REVERTS
_CONDITIONAL = ProbeExpectation.CONDITIONAL

_BASIC: list[tuple[str, ProbeExpectation]] = [
    ("supports the ERC-165 interface (0x01ffc9a7)", _SUCCEEDS),
    ("rejects the invalid interface id 0xffffffff", _SUCCEEDS),
    ("supports the ERC-721 interface (0x80ac58cd)", _SUCCEEDS),
    ("supports the ERC-721 Metadata extension (0x5b5e139f)", _CONDITIONAL),
    ("supports the ERC-721 Enumerable extension (0x780e9d63)", _CONDITIONAL),
    ("balanceOf(address(0)) reverts", _REVERTS),
    ("name() is callable", _CONDITIONAL),
    ("symbol() is callable", _CONDITIONAL),
    ("totalSupply() is callable", _CONDITIONAL),
    ("isApprovedForAll is false for an unrelated owner and operator", _SUCCEEDS),
]

_TOKEN: list[tuple[str, ProbeExpectation]] = [
    ("ownerOf(tokenId) returns a non-zero owner", _SUCCEEDS),
    ("tokenURI(tokenId) is callable", _CONDITIONAL),
    ("getApproved(tokenId) is callable", _SUCCEEDS),
]

# (title, expectation, moves a token through the giver)
_TRANSFER: list[tuple[str, ProbeExpectation, bool]] = [
    ("safeTransferFrom to a receiver returning the magic value succeeds", _SUCCEEDS, True),
    ("transferFrom moves ownership to the recipient", _SUCCEEDS, True),
    ("transferFrom to the zero address reverts", _REVERTS, True),
    ("safeTransferFrom to a contract without onERC721Received reverts", _REVERTS, True),
    ("safeTransferFrom to a receiver returning a wrong magic value reverts", _REVERTS, True),
    ("safeTransferFrom to a receiver that reverts in its hook reverts", _REVERTS, True),
    ("safeTransferFrom with data forwards the data to the receiver", _SUCCEEDS, True),
    ("transferFrom by an unapproved caller reverts", _REVERTS, False),
    ("approve then getApproved returns the approved address", _SUCCEEDS, True),
    ("approve by a non-owner reverts", _REVERTS, False),
    ("setApprovalForAll then isApprovedForAll is true", _SUCCEEDS, False),
    ("an approved operator can transfer the token", _SUCCEEDS, True),
    ("the single-token approval is cleared after a transfer", _SUCCEEDS, True),
    ("balances are updated after a transfer", _SUCCEEDS, True),
]


def _build() -> dict[ProbeCategory, dict[int, ProbeDefinition]]:
    registry: dict[ProbeCategory, dict[int, ProbeDefinition]] = {category: {} for category in ProbeCategory}
    for case_id, (title, expectation) in enumerate(_BASIC, start=1):
        registry[ProbeCategory.BASIC][case_id] = ProbeDefinition(ProbeCategory.BASIC, case_id, title, expectation)
    for case_id, (title, expectation) in enumerate(_TOKEN, start=1):
        registry[ProbeCategory.TOKEN][case_id] = ProbeDefinition(ProbeCategory.TOKEN, case_id, title, expectation)
    for case_id, (title, expectation, moves_token) in enumerate(_TRANSFER, start=1):
        registry[ProbeCategory.TRANSFER][case_id] = ProbeDefinition(
            ProbeCategory.TRANSFER,
            case_id,
            title,
            expectation,
            requires_giver=moves_token,
        )
    return registry


class ProbeCatalog:
    """Pure lookup over the closed set of compliance cases."""

    def __init__(self, registry: Mapping[ProbeCategory, Mapping[int, ProbeDefinition]] | None = None):
        self._registry = registry if registry is not None else _build()

    def lookup(self, category: ProbeCategory | str, case_id: int) -> ProbeDefinition:
        try:
            resolved = ProbeCategory(category)
        except ValueError:
            raise UnknownCase(category, case_id) from None
        # bool is an int subclass; True must not alias case 1
        if isinstance(case_id, bool) or not isinstance(case_id, int):
            raise UnknownCase(resolved.value, case_id)
        definition = self._registry.get(resolved, {}).get(case_id)
        if definition is None:
            raise UnknownCase(resolved.value, case_id)
        return definition

    def cases(self, category: ProbeCategory | str) -> list[ProbeDefinition]:
        try:
            resolved = ProbeCategory(category)
        except ValueError:
            raise UnknownCase(category) from None
        entries = self._registry.get(resolved, {})
        return [entries[case_id] for case_id in sorted(entries)]

    def all_cases(self, categories: Iterable[ProbeCategory] | None = None) -> list[ProbeDefinition]:
        selected = list(categories) if categories is not None else list(ProbeCategory)
        return [definition for category in selected for definition in self.cases(category)]


CATALOG = ProbeCatalog()


def lookup(category: ProbeCategory | str, case_id: int) -> ProbeDefinition:
    """Module-level shortcut over the default catalog."""
    return CATALOG.lookup(category, case_id)


__all__ = ["CATALOG", "ProbeCatalog", "lookup"]
