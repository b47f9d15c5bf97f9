"""Secret list kept in step with the store."""

from dataclasses import dataclass

from structlog.stdlib import BoundLogger, get_logger

from .config import NAMESPACE
from .models import Secret
from .store import SecretStoreClient


def summarize(data: dict[str, str]) -> str:
    """Render a secret's data as ``key: value`` pairs for display."""
    if not data:
        return "No data"
    return ", ".join(f"{key}: {value}" for key, value in data.items())


@dataclass(frozen=True)
class SecretRow:
    """A rendered secret, carrying its first pair to seed the edit form."""

    secret: Secret
    summary: str
    first_key: str
    first_value: str

    @property
    def name(self) -> str:
        return self.secret.name

    @property
    def namespace(self) -> str:
        return self.secret.namespace

    @classmethod
    def from_secret(cls, secret: Secret) -> "SecretRow":
        first_key, first_value = next(iter(secret.data.items()), ("", ""))
        return cls(secret, summarize(secret.data), first_key, first_value)


class SecretListView:
    """The secrets of one namespace, as last confirmed by the store.

    Rows are never patched locally. Every mutation is followed by a full
    ``load``, which replaces the rows wholesale.

    Parameters
    ----------
    store
        Client for the secret store.
    namespace
        Namespace shown by this view.
    logger
        Logger for log messages.
    """

    def __init__(
        self,
        store: SecretStoreClient,
        namespace: str = NAMESPACE,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self.namespace = namespace
        self.rows: list[SecretRow] = []
        self._store = store
        self._logger = logger or get_logger(__name__)

        # Generation of the last load issued and of the last one applied.
        self._issued = 0
        self._applied = 0

    async def load(self) -> list[SecretRow]:
        """Fetch the namespace and replace the rows.

        If a load issued later than this one has already been applied, the
        response is dropped and the newer rows are returned.

        Raises
        ------
        TransportError
        StoreError
        DecodeError
            The store call failed. The rows are left as they were.
        """
        self._issued += 1
        ticket = self._issued
        secrets = await self._store.list_secrets(self.namespace)

        if ticket < self._applied:
            self._logger.info(
                "Discarding stale secret list",
                namespace=self.namespace,
                generation=ticket,
                applied=self._applied,
            )
            return self.rows

        self._applied = ticket
        self.rows = [SecretRow.from_secret(s) for s in secrets]
        return self.rows

    def find(self, name: str) -> SecretRow | None:
        return next((row for row in self.rows if row.name == name), None)
