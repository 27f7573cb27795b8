# blogchain

This package is the state machine of a small blog chain, written in plain Python.
It stores blog posts in an ordered in-memory key-value store. It lets only a
post's creator change or remove that post, and it reads and writes the blog
module's genesis state. A `blogd` command runs the same operations against
state kept in a home directory.

## Modules

- `blogchain.types`: the store keys (`key_prefix`, `post_id_bytes`), `Params`,
  `GenesisState`, `default_params()` and `default_genesis()`. It also defines
  `Post`, which has `to_bytes()` and `from_bytes()` for a compact binary
  encoding, and the messages `MsgCreatePost`, `MsgUpdatePost`, `MsgDeletePost`
  and `MsgUpdateParams`. Each message has a `validate_basic()` check.
- `blogchain.address`: bech32 encoding (`bech32_encode`, `bech32_decode`) and
  the account address helpers `acc_address_to_bech32`,
  `acc_address_from_bech32`, `module_address`, `sample_acc_address` and
  `find_account`.
- `blogchain.store`: `KVStore`, `PrefixStore` views onto a store, and
  `paginate()` with `PageRequest` / `PageResponse`. Paging works either by
  start key or by offset. A limit of 0 means 100 entries and turns on the
  total count.
- `blogchain.keeper`: `Keeper` reads and writes params and posts and answers
  the queries (`hello`, `params`, `show_post`, `list_post`, `posts`).
  `MsgServer` executes `create_post`, `update_post`, `delete_post` and
  `update_params`.
- `blogchain.genesis`: `init_genesis`, `export_genesis`, and the JSON helpers
  `genesis_to_json`, `genesis_from_json`, `validate_genesis_json` and
  `default_genesis_json`. On decode, unknown fields are rejected.
- `blogchain.accounts`: `GenesisAccount.validate()`, which checks the vesting
  times and that a module account's address matches its module name. It also
  provides `default_node_home()`, which returns `~/.blog`.
- `blogchain.appconfig`: the module ordering tables,
  `ModuleAccountPermission`, `get_macc_perms()` and `blocked_addresses()`.
- `blogchain.settings`: `bech32_prefixes()`, which returns the account,
  validator and consensus prefixes.
- `blogchain.errors`: `BlogError` and its subclasses, such as
  `KeyNotFoundError`, `UnauthorizedError`, `InvalidAddressError` and
  `InvalidSignerError`.

## Install

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from blogchain.address import acc_address_to_bech32, module_address, sample_acc_address
from blogchain.keeper import Keeper, MsgServer
from blogchain.store import KVStore
from blogchain.types import MsgCreatePost, MsgDeletePost

authority = acc_address_to_bech32(module_address("gov"))
keeper = Keeper(KVStore(), authority)
server = MsgServer(keeper)

author = sample_acc_address()
msg = MsgCreatePost(creator=author, title="Hello", body="First post")
msg.validate_basic()
post_id = server.create_post(msg)
print(keeper.show_post(post_id))

server.delete_post(MsgDeletePost(creator=author, id=post_id))
```

Error cases:

- If anyone other than the creator updates or deletes a post, `UnauthorizedError` is raised.
- If the post id does not exist, `KeyNotFoundError` is raised.
- If `update_params` is sent by any address other than the keeper's authority, `InvalidSignerError` is raised.

## Command line

```
blogd --help
blogd --home ./node init mynode
blogd --home ./node tx create-post "Hello" "First post" --from <address>
blogd --home ./node tx update-post "Hello" "Edited" 0 --from <address>
blogd --home ./node tx delete-post 0 --from <address>
blogd --home ./node query show-post 0
blogd --home ./node query list-post --limit 10 --count-total
blogd --home ./node query posts --reverse
blogd --home ./node query hello
blogd --home ./node query params
blogd --home ./node genesis validate
blogd --home ./node export
```

The global options are `--home`, `--chain-id` and `--keyring-backend`. They
must come before the subcommand.

How the state is stored:

- `init` writes `config/genesis.json` and builds a fresh `data/state.json` from it.
- The other commands load `data/state.json`. If that file is missing, they
  start from the genesis file, or from the default genesis if there is none.
- `tx` commands save the state back when they finish.

Results are printed as JSON. Errors go to standard error with exit status 1.

## What it does not do

- It does not run a networked node: there is no consensus, peer-to-peer
  networking, RPC, gRPC or HTTP API server.
- The other chain modules (bank, staking, governance and so on) are present
  only as names in `blogchain.appconfig`.
- There is no keyring and there are no transaction signatures. `--from` takes
  a bech32 address, and that address is trusted as the sender.
  `--keyring-backend` is accepted but has no effect.
- State is a JSON file of hex-encoded key-value pairs, not a database.