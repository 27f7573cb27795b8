from pathlib import Path

import pytest

from blogchain.accounts import GenesisAccount, default_node_home
from blogchain.address import (
    acc_address_from_bech32,
    acc_address_to_bech32,
    module_address,
    sample_acc_address,
)
from blogchain.errors import InvalidAddressError


def test_default_node_home_is_dot_name_in_home():
    assert default_node_home() == Path.home() / ".blog"


def test_plain_account_is_valid():
    address = sample_acc_address()
    account = GenesisAccount(address=address)
    account.validate()
    assert acc_address_from_bech32(account.address)


def test_vesting_with_start_not_before_end_fails():
    account = GenesisAccount(
        address=sample_acc_address(),
        original_vesting={"stake": 10},
        start_time=100,
        end_time=100,
    )
    with pytest.raises(ValueError, match="vesting start-time cannot be before end-time"):
        account.validate()


def test_vesting_with_proper_times_passes():
    account = GenesisAccount(
        address=sample_acc_address(),
        original_vesting={"stake": 10},
        start_time=100,
        end_time=200,
    )
    account.validate()
    assert account.start_time < account.end_time


def test_zero_vesting_ignores_times():
    account = GenesisAccount(
        address=sample_acc_address(),
        original_vesting={"stake": 0},
        start_time=200,
        end_time=100,
    )
    account.validate()
    assert account.original_vesting == {"stake": 0}


def test_module_account_with_derived_address_is_valid():
    address = acc_address_to_bech32(module_address("gov"))
    account = GenesisAccount(address=address, module_name="gov", module_permissions=["burner"])
    account.validate()
    assert acc_address_from_bech32(address) == module_address("gov")


def test_module_account_with_wrong_address_fails():
    account = GenesisAccount(address=sample_acc_address(), module_name="gov")
    with pytest.raises(ValueError, match="cannot be derived from the module name 'gov'"):
        account.validate()


def test_module_account_with_blank_name_fails():
    account = GenesisAccount(address=sample_acc_address(), module_name="   ")
    with pytest.raises(ValueError, match="module account name cannot be blank"):
        account.validate()


def test_invalid_address_fails():
    account = GenesisAccount(address="invalid_address")
    with pytest.raises(InvalidAddressError):
        account.validate()