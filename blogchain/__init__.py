"""State machine for a small blog chain: posts, params, genesis state, bech32 addresses and the blogd command."""

__version__ = "0.1.0"