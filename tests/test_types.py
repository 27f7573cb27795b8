import pytest

from blogchain.address import acc_address_to_bech32, module_address, sample_acc_address
from blogchain.errors import InvalidAddressError
from blogchain.types import (
    GenesisState,
    MsgCreatePost,
    MsgDeletePost,
    MsgUpdateParams,
    MsgUpdatePost,
    Params,
    Post,
    default_genesis,
    default_params,
    key_prefix,
    post_id_bytes,
)


@pytest.mark.parametrize(
    "gen_state",
    [default_genesis(), GenesisState()],
    ids=["default is valid", "valid genesis state"],
)
def test_genesis_state_validate(gen_state):
    assert gen_state.validate() is None
    assert gen_state.params == default_params()


def test_default_genesis_holds_default_params():
    assert default_genesis() == GenesisState(params=Params())


@pytest.mark.parametrize("msg_cls", [MsgCreatePost, MsgUpdatePost, MsgDeletePost])
def test_msg_validate_basic_invalid_address(msg_cls):
    msg = msg_cls(creator="invalid_address")
    with pytest.raises(InvalidAddressError, match="invalid creator address"):
        msg.validate_basic()


@pytest.mark.parametrize("msg_cls", [MsgCreatePost, MsgUpdatePost, MsgDeletePost])
def test_msg_validate_basic_valid_address(msg_cls):
    msg = msg_cls(creator=sample_acc_address())
    assert msg.validate_basic() is None
    with pytest.raises(InvalidAddressError):
        msg_cls(creator=msg.creator + "x").validate_basic()


def test_update_params_invalid_authority():
    msg = MsgUpdateParams(authority="invalid", params=default_params())
    with pytest.raises(InvalidAddressError, match="invalid authority"):
        msg.validate_basic()


def test_update_params_valid_authority():
    authority = acc_address_to_bech32(module_address("gov"))
    assert MsgUpdateParams(authority=authority, params=Params()).validate_basic() is None


def test_key_prefix_and_post_id_bytes():
    assert key_prefix("Post/value/") == b"Post/value/"
    assert post_id_bytes(1) == b"\x00\x00\x00\x00\x00\x00\x00\x01"
    assert post_id_bytes(0) < post_id_bytes(1) < post_id_bytes(256)


@pytest.mark.parametrize("bad", [-1, 1 << 64])
def test_post_id_bytes_out_of_range(bad):
    with pytest.raises(ValueError):
        post_id_bytes(bad)


def test_post_round_trip():
    post = Post(creator=sample_acc_address(), id=42, title="Hello", body="World ✓")
    assert Post.from_bytes(post.to_bytes()) == post


def test_empty_post_encodes_to_nothing():
    assert Post().to_bytes() == b""
    assert Post.from_bytes(b"") == Post()


def test_post_decode_rejects_truncated_data():
    data = Post(creator="c", title="title", body="body").to_bytes()
    with pytest.raises(ValueError):
        Post.from_bytes(data[:-1])


def test_post_rejects_negative_id():
    with pytest.raises(ValueError):
        Post(id=-1).to_bytes()


def test_params_round_trip():
    assert Params.from_bytes(Params().to_bytes()) == Params()