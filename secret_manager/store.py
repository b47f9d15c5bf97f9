"""Client for the secret store REST API."""

from httpx import AsyncClient, HTTPError, Response
from structlog.stdlib import BoundLogger, get_logger

from .config import STORE_URL
from .exceptions import DecodeError, StoreError, TransportError
from .models import Secret

SECRETS_PATH = "/secrets"


def store_client(base_url: str = STORE_URL) -> AsyncClient:
    """Build the HTTP client used to reach the store.

    No timeout is set here; the store and the transport enforce their own.
    """
    return AsyncClient(base_url=base_url, timeout=None)


class SecretStoreClient:
    """List, create, update and delete secrets in the store.

    Every mutating call returns the store's response text, which is meant
    to be shown to the user as is.

    Parameters
    ----------
    http_client
        Client to use to make requests, with ``base_url`` pointing at the
        store.
    logger
        Logger for log messages.
    """

    def __init__(self, *, http_client: AsyncClient, logger: BoundLogger | None = None) -> None:
        self._client = http_client
        self._logger = logger or get_logger(__name__)

    async def list_secrets(self, namespace: str) -> list[Secret]:
        """Get every secret in a namespace.

        Parameters
        ----------
        namespace
            Namespace to list.

        Returns
        -------
        list of Secret
            Secrets in the order the store returned them.

        Raises
        ------
        TransportError
            Raised if the request could not be completed.
        StoreError
            Raised if the store returned a non-success status.
        DecodeError
            Raised if the body is not a JSON list of secret records.
        """
        r = await self._send("GET", params={"namespace": namespace})
        try:
            body = r.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in secret list: {e}") from e

        # The store encodes an empty namespace as null rather than [].
        if body is None:
            return []
        if not isinstance(body, list):
            raise DecodeError(f"Expected a list of secrets, got {type(body).__name__}")
        return [Secret.from_json(item) for item in body]

    async def create_secret(self, secret: Secret) -> str:
        """Create a new secret and return the store's message."""
        r = await self._send("POST", json=secret.to_payload())
        return r.text

    async def update_secret(self, secret: Secret) -> str:
        """Replace the data of an existing secret and return the store's message."""
        r = await self._send("PUT", json=secret.to_payload())
        return r.text

    async def delete_secret(self, namespace: str, name: str) -> str:
        """Delete a secret and return the store's message."""
        r = await self._send("DELETE", params={"namespace": namespace, "name": name})
        return r.text

    async def _send(self, method: str, **kwargs) -> Response:
        logger = self._logger.bind(method=method, path=SECRETS_PATH)
        logger.debug("Sending store request", params=kwargs.get("params"))
        try:
            r = await self._client.request(method, SECRETS_PATH, **kwargs)
        except HTTPError as e:
            message = str(e) or type(e).__name__
            logger.warning("Store request failed", error=message)
            raise TransportError(message) from e

        if not r.is_success:
            logger.warning("Store returned an error", status=r.status_code, body=r.text)
            raise StoreError(r.status_code, r.text)
        logger.debug("Store request succeeded", status=r.status_code)
        return r
