"""Store keys, parameters, genesis state, posts and messages of the blog module."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from blogchain.address import acc_address_from_bech32
from blogchain.errors import InvalidAddressError

MODULE_NAME = "blog"
STORE_KEY = MODULE_NAME
MEM_STORE_KEY = "mem_blog"
POST_KEY = "Post/value/"
POST_COUNT_KEY = "Post/count/"
PARAMS_KEY = b"p_blog"
DEFAULT_INDEX = 1

_UINT64_MAX = (1 << 64) - 1
_WIRE_VARINT = 0
_WIRE_FIXED64 = 1
_WIRE_BYTES = 2
_WIRE_FIXED32 = 5


def key_prefix(prefix: str) -> bytes:
    """Return the store key prefix for ``prefix``."""
    return prefix.encode()


def post_id_bytes(post_id: int) -> bytes:
    """Encode a post id as an 8-byte big-endian store key."""
    if not 0 <= post_id <= _UINT64_MAX:
        raise ValueError(f"post id out of range: {post_id}")
    return post_id.to_bytes(8, "big")


def _write_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    for shift in range(0, 70, 7):
        if pos >= len(data):
            raise ValueError("truncated varint")
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result & _UINT64_MAX, pos
    raise ValueError("varint too long")


def _iter_fields(data: bytes) -> Iterator[tuple[int, int, int | bytes]]:
    pos = 0
    while pos < len(data):
        tag, pos = _read_varint(data, pos)
        number, wire = tag >> 3, tag & 7
        if number == 0:
            raise ValueError("invalid field number 0")
        value: int | bytes
        if wire == _WIRE_VARINT:
            value, pos = _read_varint(data, pos)
        elif wire == _WIRE_BYTES:
            length, pos = _read_varint(data, pos)
            if pos + length > len(data):
                raise ValueError("truncated length-delimited field")
            value = bytes(data[pos : pos + length])
            pos += length
        elif wire in (_WIRE_FIXED64, _WIRE_FIXED32):
            size = 8 if wire == _WIRE_FIXED64 else 4
            if pos + size > len(data):
                raise ValueError("truncated fixed-width field")
            value = bytes(data[pos : pos + size])
            pos += size
        else:
            raise ValueError(f"unsupported wire type {wire}")
        yield number, wire, value


@dataclass(frozen=True)
class Params:
    """Module parameters. The blog module defines none."""

    def validate(self) -> None:
        """Check the parameters; every value is currently acceptable."""

    def to_bytes(self) -> bytes:
        return b""

    @classmethod
    def from_bytes(cls, data: bytes) -> Params:
        for _ in _iter_fields(data):
            pass
        return cls()


def default_params() -> Params:
    """Return the default module parameters."""
    return Params()


@dataclass
class GenesisState:
    """Initial state of the blog module."""

    params: Params = field(default_factory=Params)

    def validate(self) -> None:
        """Validate the genesis state, raising on any failure."""
        self.params.validate()


def default_genesis() -> GenesisState:
    """Return the default genesis state."""
    return GenesisState(params=default_params())


# field number -> (attribute, wire type)
_POST_FIELDS = {
    1: ("title", _WIRE_BYTES),
    2: ("body", _WIRE_BYTES),
    3: ("creator", _WIRE_BYTES),
    4: ("id", _WIRE_VARINT),
}


@dataclass
class Post:
    """A blog post as kept in the store."""

    creator: str = ""
    id: int = 0
    title: str = ""
    body: str = ""

    def to_bytes(self) -> bytes:
        """Serialise the post; fields holding default values are omitted."""
        if not 0 <= self.id <= _UINT64_MAX:
            raise ValueError(f"post id out of range: {self.id}")
        out = bytearray()
        for number, (name, wire) in _POST_FIELDS.items():
            value = getattr(self, name)
            if not value:
                continue
            out += _write_varint(number << 3 | wire)
            if wire == _WIRE_VARINT:
                out += _write_varint(value)
            else:
                encoded = value.encode("utf-8")
                out += _write_varint(len(encoded)) + encoded
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> Post:
        """Parse a serialised post, skipping unknown fields."""
        values: dict[str, object] = {}
        for number, wire, value in _iter_fields(data):
            spec = _POST_FIELDS.get(number)
            if spec is None:
                continue
            name, expected = spec
            if wire != expected:
                raise ValueError(f"field {name} has wire type {wire}, expected {expected}")
            values[name] = value if expected == _WIRE_VARINT else value.decode("utf-8")
        return cls(**values)


def _validate_creator(creator: str) -> None:
    try:
        acc_address_from_bech32(creator)
    except InvalidAddressError as exc:
        raise InvalidAddressError(f"invalid creator address ({exc})") from exc


@dataclass
class MsgCreatePost:
    """Request to publish a new post."""

    creator: str
    title: str = ""
    body: str = ""

    def validate_basic(self) -> None:
        _validate_creator(self.creator)


@dataclass
class MsgUpdatePost:
    """Request to replace the title and body of an existing post."""

    creator: str
    title: str = ""
    body: str = ""
    id: int = 0

    def validate_basic(self) -> None:
        _validate_creator(self.creator)


@dataclass
class MsgDeletePost:
    """Request to remove an existing post."""

    creator: str
    id: int = 0

    def validate_basic(self) -> None:
        _validate_creator(self.creator)


@dataclass
class MsgUpdateParams:
    """Governance request to replace the module parameters."""

    authority: str
    params: Params = field(default_factory=Params)

    def validate_basic(self) -> None:
        try:
            acc_address_from_bech32(self.authority)
        except InvalidAddressError as exc:
            raise InvalidAddressError(f"invalid authority address: {exc.detail}") from exc
        self.params.validate()


MESSAGE_TYPES = (MsgCreatePost, MsgUpdatePost, MsgDeletePost, MsgUpdateParams)