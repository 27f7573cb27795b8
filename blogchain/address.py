"""Bech32 account addresses and account lookup."""

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Iterable
from dataclasses import dataclass

from blogchain.errors import InvalidAddressError

ACCOUNT_ADDRESS_PREFIX = "blog"
ADDRESS_LENGTH = 20
MAX_ADDRESS_LENGTH = 255
MAX_BECH32_LENGTH = 1023

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INDEX = {char: index for index, char in enumerate(_CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def _polymod(values: Iterable[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _create_checksum(hrp: str, data: list[int]) -> list[int]:
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    return [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    max_value = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise ValueError("invalid data range")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & max_value)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (acc << (to_bits - bits)) & max_value:
        raise ValueError("invalid padding")
    return out


def _check_hrp(hrp: str) -> None:
    if not hrp:
        raise ValueError("empty human-readable part")
    if any(not 33 <= ord(c) <= 126 for c in hrp):
        raise ValueError("invalid character in human-readable part")


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode 8-bit ``data`` under the human-readable part ``hrp``."""
    _check_hrp(hrp)
    hrp = hrp.lower()
    five_bit = _convert_bits(data, 8, 5, pad=True)
    combined = five_bit + _create_checksum(hrp, five_bit)
    return hrp + "1" + "".join(_CHARSET[d] for d in combined)


def bech32_decode(address: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and 8-bit data."""
    if len(address) > MAX_BECH32_LENGTH:
        raise ValueError(f"bech32 string too long ({len(address)} characters)")
    if any(not 33 <= ord(c) <= 126 for c in address):
        raise ValueError("invalid character in bech32 string")
    if address.lower() != address and address.upper() != address:
        raise ValueError("mixed case in bech32 string")
    address = address.lower()
    separator = address.rfind("1")
    if separator < 1 or separator + 7 > len(address):
        raise ValueError("invalid separator index")
    hrp = address[:separator]
    try:
        data = [_CHARSET_INDEX[c] for c in address[separator + 1 :]]
    except KeyError as exc:
        raise ValueError(f"invalid character {exc.args[0]!r} in data part") from None
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise ValueError("invalid checksum")
    return hrp, bytes(_convert_bits(data[:-6], 5, 8, pad=False))


def _verify_address_format(raw: bytes) -> None:
    if not raw:
        raise InvalidAddressError("addresses cannot be empty")
    if len(raw) > MAX_ADDRESS_LENGTH:
        raise InvalidAddressError(
            f"address max length is {MAX_ADDRESS_LENGTH}, got {len(raw)}"
        )


def acc_address_to_bech32(raw: bytes, prefix: str = ACCOUNT_ADDRESS_PREFIX) -> str:
    """Render raw account address bytes as a bech32 string."""
    _verify_address_format(raw)
    return bech32_encode(prefix, raw)


def acc_address_from_bech32(address: str, prefix: str = ACCOUNT_ADDRESS_PREFIX) -> bytes:
    """Parse a bech32 account address, checking its prefix and length."""
    if not address.strip():
        raise InvalidAddressError("empty address string is not allowed")
    try:
        hrp, raw = bech32_decode(address)
    except ValueError as exc:
        raise InvalidAddressError(f"decoding bech32 failed: {exc}") from exc
    if hrp != prefix:
        raise InvalidAddressError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    _verify_address_format(raw)
    return raw


def module_address(name: str) -> bytes:
    """Return the deterministic account address of a module."""
    return hashlib.sha256(name.encode()).digest()[:ADDRESS_LENGTH]


def sample_acc_address() -> str:
    """Return a random, well-formed account address."""
    public_key = secrets.token_bytes(32)
    raw = hashlib.sha256(public_key).digest()[:ADDRESS_LENGTH]
    return acc_address_to_bech32(raw)


@dataclass(frozen=True)
class Account:
    """A known account, identified by its raw address bytes."""

    address: bytes

    @property
    def bech32(self) -> str:
        return acc_address_to_bech32(self.address)


def find_account(accounts: Iterable[Account], address: str) -> Account | None:
    """Return the account with the given bech32 address, or None."""
    raw = acc_address_from_bech32(address)
    return next((account for account in accounts if account.address == raw), None)