"""Exceptions raised while talking to the secret store."""

__all__ = [
    "DecodeError",
    "SecretClientError",
    "StoreError",
    "TransportError",
]


class SecretClientError(Exception):
    """Base class for all failures of a store operation."""


class TransportError(SecretClientError):
    """The request could not be sent or the connection failed."""


class StoreError(SecretClientError):
    """The store answered with a non-success status.

    Parameters
    ----------
    status
        HTTP status code of the response.
    text
        Body of the response, kept verbatim since the store only returns
        human-readable text.
    """

    def __init__(self, status: int, text: str) -> None:
        super().__init__(text)
        self.status = status
        self.text = text

    def __str__(self) -> str:
        return self.text


class DecodeError(SecretClientError):
    """The list response was not a JSON list of secret records."""
