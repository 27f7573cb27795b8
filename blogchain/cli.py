"""Command line interface of the blog node."""

from __future__ import annotations

import argparse
import base64
import binascii
import json
import sys
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from blogchain.accounts import APP_NAME, default_node_home
from blogchain.address import acc_address_to_bech32, module_address
from blogchain.appconfig import GOV
from blogchain.errors import BlogError
from blogchain.genesis import (
    export_genesis,
    genesis_from_json,
    genesis_to_json,
    init_genesis,
    validate_genesis_json,
)
from blogchain.keeper import Keeper, MsgServer
from blogchain.store import KVStore, PageRequest, PageResponse
from blogchain.types import (
    MODULE_NAME,
    MsgCreatePost,
    MsgDeletePost,
    MsgUpdatePost,
    Post,
    default_genesis,
)

CHAIN_ID = APP_NAME.replace("-", "")
KEYRING_BACKEND = "test"
GENESIS_FILE = Path("config") / "genesis.json"
STATE_FILE = Path("data") / "state.json"


def _authority() -> str:
    return acc_address_to_bech32(module_address(GOV))


def _read_genesis_document(path: Path) -> dict[str, Any]:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid genesis file {path}: {exc}") from exc
    if not isinstance(document, dict):
        raise ValueError(f"invalid genesis file {path}: not a JSON object")
    return document


def _module_genesis_json(document: dict[str, Any]) -> str:
    app_state = document.get("app_state") or {}
    if not isinstance(app_state, dict):
        raise ValueError("app_state must be a JSON object")
    return json.dumps(app_state.get(MODULE_NAME) or {})


def _load_store(home: Path) -> KVStore:
    store = KVStore()
    state_path = home / STATE_FILE
    if state_path.exists():
        try:
            pairs = json.loads(state_path.read_text(encoding="utf-8"))
            for key, value in pairs.items():
                store.set(bytes.fromhex(key), bytes.fromhex(value))
        except (json.JSONDecodeError, AttributeError, ValueError) as exc:
            raise ValueError(f"corrupt state file {state_path}: {exc}") from exc
        return store

    genesis_path = home / GENESIS_FILE
    if genesis_path.exists():
        genesis = genesis_from_json(_module_genesis_json(_read_genesis_document(genesis_path)))
    else:
        genesis = default_genesis()
    genesis.validate()
    init_genesis(Keeper(store, _authority()), genesis)
    return store


def _save_store(home: Path, store: KVStore) -> None:
    state_path = home / STATE_FILE
    state_path.parent.mkdir(parents=True, exist_ok=True)
    pairs = {key.hex(): value.hex() for key, value in store.items()}
    state_path.write_text(json.dumps(pairs, sort_keys=True, indent=2), encoding="utf-8")


@contextmanager
def _opened_keeper(home: Path, write: bool) -> Iterator[Keeper]:
    store = _load_store(home)
    yield Keeper(store, _authority())
    if write:
        _save_store(home, store)


def _post_to_dict(post: Post) -> dict[str, Any]:
    return {"creator": post.creator, "id": post.id, "title": post.title, "body": post.body}


def _page_to_dict(page: PageResponse) -> dict[str, Any]:
    next_key = base64.b64encode(page.next_key).decode() if page.next_key else None
    return {"next_key": next_key, "total": page.total}


def _page_request(args: argparse.Namespace) -> PageRequest:
    try:
        key = base64.b64decode(args.page_key, validate=True) if args.page_key else b""
    except binascii.Error as exc:
        raise ValueError(f"invalid page key: {exc}") from exc
    return PageRequest(
        key=key,
        offset=args.offset,
        limit=args.limit,
        count_total=args.count_total,
        reverse=args.reverse,
    )


def _cmd_init(args: argparse.Namespace) -> dict[str, Any]:
    home: Path = args.home
    genesis_path = home / GENESIS_FILE
    if genesis_path.exists() and not args.overwrite:
        raise ValueError(f"genesis file already exists: {genesis_path}")
    module_state = json.loads(genesis_to_json(default_genesis()))
    document = {"chain_id": args.chain_id, "app_state": {MODULE_NAME: module_state}}
    genesis_path.parent.mkdir(parents=True, exist_ok=True)
    genesis_path.write_text(json.dumps(document, indent=2, sort_keys=True), encoding="utf-8")
    state_path = home / STATE_FILE
    if state_path.exists():
        state_path.unlink()
    _save_store(home, _load_store(home))
    return {"moniker": args.moniker, "chain_id": args.chain_id, "app_state": document["app_state"]}


def _cmd_validate_genesis(args: argparse.Namespace) -> dict[str, Any]:
    path = Path(args.file) if args.file else args.home / GENESIS_FILE
    validate_genesis_json(_module_genesis_json(_read_genesis_document(path)))
    return {"valid": True, "file": str(path)}


def _cmd_export(args: argparse.Namespace) -> dict[str, Any]:
    with _opened_keeper(args.home, write=False) as keeper:
        state = json.loads(genesis_to_json(export_genesis(keeper)))
    return {"chain_id": args.chain_id, "app_state": {MODULE_NAME: state}}


def _cmd_params(args: argparse.Namespace) -> dict[str, Any]:
    with _opened_keeper(args.home, write=False) as keeper:
        keeper.params()
    return {"params": {}}


def _cmd_hello(args: argparse.Namespace) -> dict[str, Any]:
    with _opened_keeper(args.home, write=False) as keeper:
        return {"text": keeper.hello()}


def _cmd_show_post(args: argparse.Namespace) -> dict[str, Any]:
    with _opened_keeper(args.home, write=False) as keeper:
        return {"post": _post_to_dict(keeper.show_post(args.id))}


def _listing(method: str) -> Callable[[argparse.Namespace], dict[str, Any]]:
    def run(args: argparse.Namespace) -> dict[str, Any]:
        with _opened_keeper(args.home, write=False) as keeper:
            posts, page = getattr(keeper, method)(_page_request(args))
        return {"post": [_post_to_dict(p) for p in posts], "pagination": _page_to_dict(page)}

    return run


def _cmd_create_post(args: argparse.Namespace) -> dict[str, Any]:
    msg = MsgCreatePost(creator=args.sender, title=args.title, body=args.body)
    msg.validate_basic()
    with _opened_keeper(args.home, write=True) as keeper:
        post_id = MsgServer(keeper).create_post(msg)
    return {"id": post_id}


def _cmd_update_post(args: argparse.Namespace) -> dict[str, Any]:
    msg = MsgUpdatePost(creator=args.sender, title=args.title, body=args.body, id=args.id)
    msg.validate_basic()
    with _opened_keeper(args.home, write=True) as keeper:
        MsgServer(keeper).update_post(msg)
    return {}


def _cmd_delete_post(args: argparse.Namespace) -> dict[str, Any]:
    msg = MsgDeletePost(creator=args.sender, id=args.id)
    msg.validate_basic()
    with _opened_keeper(args.home, write=True) as keeper:
        MsgServer(keeper).delete_post(msg)
    return {}


def _add_pagination(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--page-key", default="", help="base64 key of the first entry")
    parser.add_argument("--offset", type=int, default=0, help="number of entries to skip")
    parser.add_argument("--limit", type=int, default=0, help="maximum number of entries")
    parser.add_argument("--count-total", action="store_true", help="count all entries")
    parser.add_argument("--reverse", action="store_true", help="iterate in descending order")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser of the node command."""
    parser = argparse.ArgumentParser(prog=f"{APP_NAME}d", description=f"Start {APP_NAME} node")
    parser.add_argument("--home", type=Path, default=default_node_home(),
                        help="directory for configuration and data")
    parser.add_argument("--chain-id", default=CHAIN_ID, help="the network chain ID")
    parser.add_argument("--keyring-backend", default=KEYRING_BACKEND,
                        help="select keyring's backend")
    commands = parser.add_subparsers(dest="command", metavar="command")

    init = commands.add_parser("init", help="initialize configuration and genesis files")
    init.add_argument("moniker")
    init.add_argument("--overwrite", "-o", action="store_true", help="overwrite the genesis file")
    init.set_defaults(handler=_cmd_init)

    genesis = commands.add_parser("genesis", help="application genesis subcommands")
    genesis_commands = genesis.add_subparsers(dest="subcommand", metavar="command")
    validate = genesis_commands.add_parser("validate", help="validate the genesis file")
    validate.add_argument("file", nargs="?")
    validate.set_defaults(handler=_cmd_validate_genesis)

    export = commands.add_parser("export", help="export state to JSON")
    export.set_defaults(handler=_cmd_export)

    query = commands.add_parser("query", aliases=["q"], help="querying subcommands")
    queries = query.add_subparsers(dest="subcommand", metavar="command")
    queries.add_parser("params", help="shows the parameters of the module").set_defaults(
        handler=_cmd_params)
    queries.add_parser("hello", help="query hello").set_defaults(handler=_cmd_hello)
    posts = queries.add_parser("posts", help="query posts")
    _add_pagination(posts)
    posts.set_defaults(handler=_listing("posts"))
    show = queries.add_parser("show-post", help="query show-post")
    show.add_argument("id", type=int)
    show.set_defaults(handler=_cmd_show_post)
    listing = queries.add_parser("list-post", help="query list-post")
    _add_pagination(listing)
    listing.set_defaults(handler=_listing("list_post"))

    tx = commands.add_parser("tx", help="transactions subcommands")
    txs = tx.add_subparsers(dest="subcommand", metavar="command")
    create = txs.add_parser("create-post", help="send a createPost tx")
    create.add_argument("title")
    create.add_argument("body")
    create.set_defaults(handler=_cmd_create_post)
    update = txs.add_parser("update-post", help="send a update-post tx")
    update.add_argument("title")
    update.add_argument("body")
    update.add_argument("id", type=int)
    update.set_defaults(handler=_cmd_update_post)
    delete = txs.add_parser("delete-post", help="send a delete-post tx")
    delete.add_argument("id", type=int)
    delete.set_defaults(handler=_cmd_delete_post)
    for sub in (create, update, delete):
        sub.add_argument("--from", dest="sender", required=True, help="address of the sender")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the node command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    try:
        result = handler(args)
    except (BlogError, ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())