import pytest

from blogchain.errors import (
    BlogError,
    InvalidAddressError,
    InvalidRequestError,
    InvalidSignerError,
    KeyNotFoundError,
    SampleError,
    UnauthorizedError,
)


def _all_errors(detail=None):
    return [
        InvalidSignerError(detail),
        SampleError(detail),
        UnauthorizedError(detail),
        InvalidAddressError(detail),
        InvalidRequestError(detail),
        KeyNotFoundError(detail),
    ]


def test_invalid_signer_is_registered_in_blog_codespace():
    err = InvalidSignerError()
    assert (err.codespace, err.code) == ("blog", 1100)
    assert str(err) == "expected gov account as only signer for proposal message"


def test_sample_error_is_registered_in_blog_codespace():
    err = SampleError()
    assert (err.codespace, err.code) == ("blog", 1101)
    assert str(err) == "sample error"


def test_detail_is_placed_before_description():
    err = KeyNotFoundError("key 7 doesn't exist")
    assert err.detail == "key 7 doesn't exist"
    assert str(err) == f"key 7 doesn't exist: {KeyNotFoundError.description}"


def test_without_detail_only_description_is_shown():
    err = UnauthorizedError()
    assert err.detail is None
    assert str(err) == UnauthorizedError.description


@pytest.mark.parametrize("index", range(6))
def test_every_error_is_a_blog_error(index):
    err = _all_errors("context")[index]
    with pytest.raises(BlogError) as info:
        raise err
    assert info.value.detail == "context"
    assert str(info.value) == f"context: {type(err).description}"


def test_codes_are_unique_per_codespace():
    errors = _all_errors()
    pairs = {(err.codespace, err.code) for err in errors}
    assert len(pairs) == len(errors)