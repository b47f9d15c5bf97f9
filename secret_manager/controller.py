"""Create, update and delete through the shared secret form."""

from dataclasses import dataclass
from typing import Literal

from structlog.stdlib import BoundLogger, get_logger

from .exceptions import SecretClientError
from .list_view import SecretListView
from .models import EditSession, Mode
from .store import SecretStoreClient


@dataclass(frozen=True)
class Notice:
    """Status message shown after an operation."""

    text: str
    level: Literal["success", "error"]

    @classmethod
    def success(cls, message: str) -> "Notice":
        return cls(f"Success: {message}", "success")

    @classmethod
    def error(cls, error: Exception | str) -> "Notice":
        return cls(f"Error: {error}", "error")


class SecretEditController:
    """Owns the single secret form and the calls that change the store.

    ``session`` is the open form, or `None` when the form is closed. Opening
    the form always builds a new session, so the mode of a submit is the one
    chosen when the form was opened.

    Parameters
    ----------
    store
        Client for the secret store.
    list_view
        List refreshed after every successful change.
    session
        Form left open by a previous interaction, if any.
    logger
        Logger for log messages.
    """

    def __init__(
        self,
        store: SecretStoreClient,
        list_view: SecretListView,
        *,
        session: EditSession | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self.session = session
        self._store = store
        self._list_view = list_view
        self._logger = logger or get_logger(__name__)

    @property
    def is_open(self) -> bool:
        return self.session is not None

    @property
    def namespace(self) -> str:
        return self._list_view.namespace

    def open_create(self) -> EditSession:
        self.session = EditSession.create()
        self._logger.debug("Opened secret form", mode=Mode.CREATE.value)
        return self.session

    def open_edit(self, name: str, key: str, value: str) -> EditSession:
        self.session = EditSession.edit(name, key, value)
        self._logger.debug("Opened secret form", mode=Mode.EDIT.value, name=name)
        return self.session

    def close(self) -> None:
        self.session = None

    async def submit(self, session: EditSession) -> Notice:
        """Create or update a secret from the form.

        On failure the form stays open with ``session`` so the user can retry
        without typing again.
        """
        self.session = session
        secret = session.to_secret(self.namespace)
        logger = self._logger.bind(mode=session.mode.value, name=secret.name, namespace=self.namespace)
        try:
            if session.mode is Mode.CREATE:
                message = await self._store.create_secret(secret)
            else:
                message = await self._store.update_secret(secret)
        except SecretClientError as e:
            logger.warning("Secret submit failed", error=str(e))
            return Notice.error(e)

        logger.info("Secret submitted")
        self.close()
        return await self._refresh(Notice.success(message))

    async def delete(self, name: str) -> Notice:
        """Delete a secret. The list is only changed by the reload after."""
        logger = self._logger.bind(name=name, namespace=self.namespace)
        try:
            message = await self._store.delete_secret(self.namespace, name)
        except SecretClientError as e:
            logger.warning("Secret delete failed", error=str(e))
            return Notice.error(e)

        logger.info("Secret deleted")
        return await self._refresh(Notice.success(message))

    async def _refresh(self, notice: Notice) -> Notice:
        try:
            await self._list_view.load()
        except SecretClientError as e:
            self._logger.warning("Reloading secrets failed", error=str(e))
            return Notice.error(e)
        return notice
