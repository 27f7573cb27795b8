"""Genesis import, export and JSON encoding for the blog module."""

from __future__ import annotations

import json
from typing import Any

from blogchain.keeper import Keeper
from blogchain.types import MODULE_NAME, GenesisState, Params, default_genesis

_GENESIS_FIELDS = frozenset({"params"})
_PARAMS_FIELDS: frozenset[str] = frozenset()


def init_genesis(keeper: Keeper, genesis: GenesisState) -> None:
    """Initialise the module's state from ``genesis``."""
    keeper.set_params(genesis.params)


def export_genesis(keeper: Keeper) -> GenesisState:
    """Return the module's current state as a genesis state."""
    genesis = default_genesis()
    genesis.params = keeper.get_params()
    return genesis


def _params_to_dict(params: Params) -> dict[str, Any]:
    return {}


def genesis_to_json(genesis: GenesisState) -> str:
    """Encode a genesis state as compact JSON."""
    document = {"params": _params_to_dict(genesis.params)}
    return json.dumps(document, separators=(",", ":"), sort_keys=True)


def _check_fields(obj: Any, allowed: frozenset[str], what: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ValueError(f"{what} must be a JSON object")
    unknown = sorted(set(obj) - allowed)
    if unknown:
        raise ValueError(f"unknown field {unknown[0]!r} in {what}")
    return obj


def genesis_from_json(data: str | bytes) -> GenesisState:
    """Decode a genesis state from JSON, rejecting unknown fields."""
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    document = _check_fields(document, _GENESIS_FIELDS, "genesis state")
    params_obj = document.get("params")
    if params_obj is None:
        return GenesisState(params=Params())
    _check_fields(params_obj, _PARAMS_FIELDS, "params")
    return GenesisState(params=Params())


def validate_genesis_json(data: str | bytes) -> None:
    """Decode and validate a genesis document, raising ValueError on failure."""
    try:
        genesis = genesis_from_json(data)
    except ValueError as exc:
        raise ValueError(f"failed to unmarshal {MODULE_NAME} genesis state: {exc}") from exc
    genesis.validate()


def default_genesis_json() -> str:
    """Return the default genesis state encoded as JSON."""
    return genesis_to_json(default_genesis())