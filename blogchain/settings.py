"""Bech32 address prefixes used by the chain."""

from __future__ import annotations

from dataclasses import dataclass

from blogchain.address import ACCOUNT_ADDRESS_PREFIX


@dataclass(frozen=True)
class AddressPrefixes:
    """Human-readable parts for account, validator and consensus keys."""

    account_address: str
    account_pubkey: str
    validator_address: str
    validator_pubkey: str
    consensus_address: str
    consensus_pubkey: str


def bech32_prefixes() -> AddressPrefixes:
    """Return the chain's bech32 prefixes, derived from the account prefix."""
    base = ACCOUNT_ADDRESS_PREFIX
    return AddressPrefixes(
        account_address=base,
        account_pubkey=base + "pub",
        validator_address=base + "valoper",
        validator_pubkey=base + "valoperpub",
        consensus_address=base + "valcons",
        consensus_pubkey=base + "valconspub",
    )