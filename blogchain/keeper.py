"""State access, message handling and queries of the blog module."""

from __future__ import annotations

import dataclasses
import logging

from blogchain.address import acc_address_from_bech32
from blogchain.errors import (
    InvalidAddressError,
    InvalidSignerError,
    KeyNotFoundError,
    UnauthorizedError,
)
from blogchain.store import KVStore, PageRequest, PageResponse, PrefixStore, paginate
from blogchain.types import (
    MODULE_NAME,
    PARAMS_KEY,
    POST_COUNT_KEY,
    POST_KEY,
    MsgCreatePost,
    MsgDeletePost,
    MsgUpdateParams,
    MsgUpdatePost,
    Params,
    Post,
    key_prefix,
    post_id_bytes,
)


class Keeper:
    """Reads and writes the blog module's state in a key-value store."""

    def __init__(self, store: KVStore, authority: str) -> None:
        try:
            acc_address_from_bech32(authority)
        except InvalidAddressError as exc:
            raise ValueError(f"invalid authority address: {authority}") from exc
        self._store = store
        self.authority = authority
        self.logger = logging.getLogger(f"blogchain.x/{MODULE_NAME}")

    @property
    def _post_store(self) -> PrefixStore:
        return PrefixStore(self._store, key_prefix(POST_KEY))

    def get_params(self) -> Params:
        """Return the stored parameters, or the zero value if none are stored."""
        data = self._store.get(PARAMS_KEY)
        if data is None:
            return Params()
        return Params.from_bytes(data)

    def set_params(self, params: Params) -> None:
        self._store.set(PARAMS_KEY, params.to_bytes())

    def append_post(self, post: Post) -> int:
        """Store ``post`` under the next free id and return that id."""
        count = self.get_post_count()
        stored = dataclasses.replace(post, id=count)
        self._post_store.set(post_id_bytes(count), stored.to_bytes())
        self.set_post_count(count + 1)
        return count

    def get_post_count(self) -> int:
        data = self._store.get(key_prefix(POST_COUNT_KEY))
        if data is None:
            return 0
        if len(data) < 8:
            raise ValueError("stored post count is shorter than 8 bytes")
        return int.from_bytes(data[:8], "big")

    def set_post_count(self, count: int) -> None:
        self._store.set(key_prefix(POST_COUNT_KEY), post_id_bytes(count))

    def get_post(self, post_id: int) -> Post | None:
        """Return the post with ``post_id``, or None if it does not exist."""
        data = self._post_store.get(post_id_bytes(post_id))
        if data is None:
            return None
        return Post.from_bytes(data)

    def set_post(self, post: Post) -> None:
        self._post_store.set(post_id_bytes(post.id), post.to_bytes())

    def remove_post(self, post_id: int) -> None:
        self._post_store.delete(post_id_bytes(post_id))

    def hello(self) -> str:
        return "Hello world!"

    def params(self) -> Params:
        """Query the module parameters."""
        return self.get_params()

    def show_post(self, post_id: int) -> Post:
        """Query one post, raising KeyNotFoundError if it does not exist."""
        post = self.get_post(post_id)
        if post is None:
            raise KeyNotFoundError()
        return post

    def _page_of_posts(
        self, store: PrefixStore, pagination: PageRequest | None
    ) -> tuple[list[Post], PageResponse]:
        pairs, page = paginate(store, pagination)
        return [Post.from_bytes(value) for _, value in pairs], page

    def list_post(
        self, pagination: PageRequest | None = None
    ) -> tuple[list[Post], PageResponse]:
        """Query one page of posts in id order."""
        return self._page_of_posts(self._post_store, pagination)

    def posts(
        self, pagination: PageRequest | None = None
    ) -> tuple[list[Post], PageResponse]:
        """Query one page of posts in id order."""
        return self._page_of_posts(PrefixStore(self._store, POST_KEY.encode()), pagination)


class MsgServer:
    """Executes the blog module's transaction messages against a keeper."""

    def __init__(self, keeper: Keeper) -> None:
        self.keeper = keeper

    def create_post(self, msg: MsgCreatePost) -> int:
        """Publish a new post and return its id."""
        post = Post(creator=msg.creator, title=msg.title, body=msg.body)
        return self.keeper.append_post(post)

    def _owned_post(self, post_id: int, creator: str) -> Post:
        existing = self.keeper.get_post(post_id)
        if existing is None:
            raise KeyNotFoundError(f"key {post_id} doesn't exist")
        if creator != existing.creator:
            raise UnauthorizedError("incorrect owner")
        return existing

    def update_post(self, msg: MsgUpdatePost) -> None:
        """Replace an existing post; only its creator may do so."""
        self._owned_post(msg.id, msg.creator)
        self.keeper.set_post(
            Post(creator=msg.creator, id=msg.id, title=msg.title, body=msg.body)
        )

    def delete_post(self, msg: MsgDeletePost) -> None:
        """Remove an existing post; only its creator may do so."""
        self._owned_post(msg.id, msg.creator)
        self.keeper.remove_post(msg.id)

    def update_params(self, msg: MsgUpdateParams) -> None:
        """Replace the module parameters; only the authority may do so."""
        if self.keeper.authority != msg.authority:
            raise InvalidSignerError(
                f"invalid authority; expected {self.keeper.authority}, got {msg.authority}"
            )
        self.keeper.set_params(msg.params)