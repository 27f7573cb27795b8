"""Module ordering, module account permissions and blocked accounts of the chain."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from blogchain.types import MODULE_NAME as BLOG_MODULE_NAME

APP_NAME = "blog"

# Module names of the modules wired into the application.
AUTH = "auth"
BANK = "bank"
CAPABILITY = "capability"
CIRCUIT = "circuit"
CONSENSUS = "consensus"
CRISIS = "crisis"
DISTRIBUTION = "distribution"
EVIDENCE = "evidence"
FEEGRANT = "feegrant"
GENUTIL = "genutil"
GOV = "gov"
GROUP = "group"
AUTHZ = "authz"
IBC = "ibc"
IBC_FEE = "feeibc"
IBC_TRANSFER = "transfer"
INTERCHAIN_ACCOUNTS = "interchainaccounts"
MINT = "mint"
NFT = "nft"
PARAMS = "params"
SLASHING = "slashing"
STAKING = "staking"
UPGRADE = "upgrade"
VESTING = "vesting"

# Module account names that differ from a module name.
FEE_COLLECTOR = "fee_collector"
BONDED_POOL = "bonded_tokens_pool"
NOT_BONDED_POOL = "not_bonded_tokens_pool"

# Module account permissions.
MINTER = "minter"
BURNER = "burner"
STAKING_PERMISSION = STAKING

# Capability must come first so other modules can claim capabilities in
# InitChain; genutil must follow staking and auth.
GENESIS_MODULE_ORDER: tuple[str, ...] = (
    CAPABILITY,
    AUTH,
    BANK,
    DISTRIBUTION,
    STAKING,
    SLASHING,
    GOV,
    MINT,
    CRISIS,
    IBC,
    GENUTIL,
    EVIDENCE,
    AUTHZ,
    IBC_TRANSFER,
    INTERCHAIN_ACCOUNTS,
    IBC_FEE,
    FEEGRANT,
    PARAMS,
    UPGRADE,
    VESTING,
    NFT,
    GROUP,
    CONSENSUS,
    CIRCUIT,
    BLOG_MODULE_NAME,
)

# Slashing runs after distribution so the validator fee pool is empty;
# capability runs before any module that uses capabilities.
BEGIN_BLOCKERS: tuple[str, ...] = (
    MINT,
    DISTRIBUTION,
    SLASHING,
    EVIDENCE,
    STAKING,
    AUTHZ,
    GENUTIL,
    CAPABILITY,
    IBC,
    IBC_TRANSFER,
    INTERCHAIN_ACCOUNTS,
    IBC_FEE,
    BLOG_MODULE_NAME,
)

END_BLOCKERS: tuple[str, ...] = (
    CRISIS,
    GOV,
    STAKING,
    FEEGRANT,
    GROUP,
    GENUTIL,
    IBC,
    IBC_TRANSFER,
    CAPABILITY,
    INTERCHAIN_ACCOUNTS,
    IBC_FEE,
    BLOG_MODULE_NAME,
)

PRE_BLOCKERS: tuple[str, ...] = (UPGRADE,)

# The auth module keeps its state under a store key other than its name.
STORE_KEY_OVERRIDES: dict[str, str] = {AUTH: "acc"}

GROUP_MAX_EXECUTION_PERIOD = timedelta(seconds=1209600)
GROUP_MAX_METADATA_LEN = 255


@dataclass(frozen=True)
class ModuleAccountPermission:
    """A module account and the permissions it holds."""

    account: str
    permissions: tuple[str, ...] = ()


MODULE_ACCOUNT_PERMISSIONS: tuple[ModuleAccountPermission, ...] = (
    ModuleAccountPermission(FEE_COLLECTOR),
    ModuleAccountPermission(DISTRIBUTION),
    ModuleAccountPermission(MINT, (MINTER,)),
    ModuleAccountPermission(BONDED_POOL, (BURNER, STAKING_PERMISSION)),
    ModuleAccountPermission(NOT_BONDED_POOL, (BURNER, STAKING_PERMISSION)),
    ModuleAccountPermission(GOV, (BURNER,)),
    ModuleAccountPermission(NFT),
    ModuleAccountPermission(IBC_TRANSFER, (MINTER, BURNER)),
    ModuleAccountPermission(IBC_FEE),
    ModuleAccountPermission(INTERCHAIN_ACCOUNTS),
)

# The governance module account is allowed to receive funds.
BLOCKED_MODULE_ACCOUNTS: tuple[str, ...] = (
    FEE_COLLECTOR,
    DISTRIBUTION,
    MINT,
    BONDED_POOL,
    NOT_BONDED_POOL,
    NFT,
)


def get_macc_perms() -> dict[str, list[str]]:
    """Return a fresh copy of the module account permissions, keyed by account."""
    return {perm.account: list(perm.permissions) for perm in MODULE_ACCOUNT_PERMISSIONS}


def blocked_addresses() -> set[str]:
    """Return the module accounts that may not receive funds.

    Falls back to every module account when no explicit block list is set.
    """
    if BLOCKED_MODULE_ACCOUNTS:
        return set(BLOCKED_MODULE_ACCOUNTS)
    return set(get_macc_perms())