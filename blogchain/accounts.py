"""Genesis accounts and the node's default home directory."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from blogchain.address import acc_address_from_bech32, acc_address_to_bech32, module_address

APP_NAME = "blog"


def default_node_home() -> Path:
    """Return the default home directory of the node."""
    return Path.home() / f".{APP_NAME}"


def _coins_are_zero(coins: Mapping[str, int]) -> bool:
    return all(amount == 0 for amount in coins.values())


@dataclass
class GenesisAccount:
    """An account in the genesis state, optionally vesting or owned by a module."""

    address: str = ""
    account_number: int = 0
    sequence: int = 0

    original_vesting: dict[str, int] = field(default_factory=dict)
    delegated_free: dict[str, int] = field(default_factory=dict)
    delegated_vesting: dict[str, int] = field(default_factory=dict)
    start_time: int = 0
    end_time: int = 0

    module_name: str = ""
    module_permissions: list[str] = field(default_factory=list)

    def _validate_module_account(self) -> None:
        if not self.module_name.strip():
            raise ValueError("module account name cannot be blank")
        expected = acc_address_to_bech32(module_address(self.module_name))
        if self.address != expected:
            raise ValueError(
                f"address {self.address} cannot be derived from the module name "
                f"'{self.module_name}'"
            )

    def validate(self) -> None:
        """Check the vesting and module account fields, raising on failure."""
        if not _coins_are_zero(self.original_vesting):
            if self.start_time >= self.end_time:
                raise ValueError("vesting start-time cannot be before end-time")
        if self.module_name:
            self._validate_module_account()
        if self.address:
            acc_address_from_bech32(self.address)