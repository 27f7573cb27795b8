"""Error types raised by the blog chain."""

from __future__ import annotations


class BlogError(Exception):
    """Base class for errors that carry a registered codespace and code.

    An optional ``detail`` is placed in front of the registered description,
    separated by a colon.
    """

    codespace = "blog"
    code = 1
    description = "blog error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """The full error text: detail followed by the description."""
        if self.detail:
            return f"{self.detail}: {self.description}"
        return self.description

    def __str__(self) -> str:
        return self.message


class InvalidSignerError(BlogError):
    """The signer of a governance message is not the module authority."""

    codespace = "blog"
    code = 1100
    description = "expected gov account as only signer for proposal message"


class SampleError(BlogError):
    """Placeholder error registered by the blog module."""

    codespace = "blog"
    code = 1101
    description = "sample error"


class UnauthorizedError(BlogError):
    """The sender is not allowed to perform the operation."""

    codespace = "sdk"
    code = 4
    description = "unauthorized"


class InvalidAddressError(BlogError):
    """An address string could not be parsed or is malformed."""

    codespace = "sdk"
    code = 7
    description = "invalid address"


class InvalidRequestError(BlogError):
    """A query or request is missing or inconsistent."""

    codespace = "sdk"
    code = 18
    description = "invalid request"


class KeyNotFoundError(BlogError):
    """The requested key does not exist in the store."""

    codespace = "sdk"
    code = 38
    description = "key not found"