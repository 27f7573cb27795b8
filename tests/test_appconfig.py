import pytest

from blogchain.appconfig import (
    BEGIN_BLOCKERS,
    BLOCKED_MODULE_ACCOUNTS,
    END_BLOCKERS,
    GENESIS_MODULE_ORDER,
    GOV,
    MINT,
    MODULE_ACCOUNT_PERMISSIONS,
    ModuleAccountPermission,
    blocked_addresses,
    get_macc_perms,
)


def test_macc_perms_keys_match_declared_accounts():
    perms = get_macc_perms()
    assert set(perms) == {p.account for p in MODULE_ACCOUNT_PERMISSIONS}
    assert len(perms) == len(MODULE_ACCOUNT_PERMISSIONS)


def test_macc_perms_values_match_declared_permissions():
    perms = get_macc_perms()
    for declared in MODULE_ACCOUNT_PERMISSIONS:
        assert perms[declared.account] == list(declared.permissions)


def test_mint_account_is_a_minter():
    assert get_macc_perms()[MINT] == ["minter"]


def test_macc_perms_returns_a_copy():
    first = get_macc_perms()
    first[MINT].append("extra")
    first.pop(GOV)
    second = get_macc_perms()
    assert GOV in second
    assert "extra" not in second[MINT]


def test_blocked_addresses_match_block_list():
    assert blocked_addresses() == set(BLOCKED_MODULE_ACCOUNTS)


def test_governance_account_is_not_blocked():
    assert "gov" not in blocked_addresses()
    assert GOV in get_macc_perms()


def test_blocked_accounts_are_module_accounts():
    assert blocked_addresses() <= set(get_macc_perms())


def test_blocked_addresses_returns_fresh_set():
    first = blocked_addresses()
    first.clear()
    assert blocked_addresses() == set(BLOCKED_MODULE_ACCOUNTS)


@pytest.mark.parametrize("order", [GENESIS_MODULE_ORDER, BEGIN_BLOCKERS, END_BLOCKERS])
def test_orders_have_no_duplicates(order):
    assert len(set(order)) == len(order)


def test_slashing_follows_distribution_in_begin_blockers():
    assert BEGIN_BLOCKERS.index("slashing") > BEGIN_BLOCKERS.index("distribution")


def test_capability_begins_before_ibc():
    assert BEGIN_BLOCKERS.index("capability") < BEGIN_BLOCKERS.index("ibc")


def test_module_account_permission_defaults_to_no_permissions():
    perm = ModuleAccountPermission("someone")
    assert perm.permissions == ()
    with pytest.raises(AttributeError):
        perm.account = "other"