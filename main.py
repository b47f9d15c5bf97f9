"""Secret Manager - create, edit and delete secrets in a secret store.

This module contains only route definitions. Business logic lives in:
- secret_manager/store.py - Secret store API client
- secret_manager/list_view.py - Secret list kept in step with the store
- secret_manager/controller.py - Shared create/edit form and mutations
- secret_manager/components.py - UI components
- secret_manager/views/ - View functions
"""

from fasthtml.common import *
from starlette.requests import Request
from structlog.stdlib import get_logger

from secret_manager.components import page_layout
from secret_manager.config import NAMESPACE, PORT
from secret_manager.controller import Notice, SecretEditController
from secret_manager.exceptions import SecretClientError
from secret_manager.list_view import SecretListView
from secret_manager.log import configure_logging
from secret_manager.models import EditSession
from secret_manager.store import SecretStoreClient, store_client
from secret_manager.views.secrets import (
    secret_details,
    secret_form,
    secret_list_oob,
    secret_table,
    secrets_content,
    status_message,
)

# -----------------------------------------------------------------------------
# App Setup
# -----------------------------------------------------------------------------

configure_logging()
logger = get_logger("secret_manager")

http_client = store_client()
store = SecretStoreClient(http_client=http_client, logger=logger)
list_view = SecretListView(store, NAMESPACE, logger=logger)


async def close_store():
    await http_client.aclose()


app, rt = fast_app(
    on_shutdown=[close_store],
    hdrs=(
        Style("""
            * { font-family: ui-monospace, SFMono-Regular, "SF Mono", Menlo, Consolas, monospace; }
            #global-loader {
                position: fixed;
                top: 0; left: 0; right: 0;
                height: 3px;
                background: var(--pico-primary);
                z-index: 9999;
                animation: loading 1s ease-in-out infinite;
            }
            @keyframes loading {
                0% { transform: translateX(-100%); }
                50% { transform: translateX(0%); }
                100% { transform: translateX(100%); }
            }
            .actions span { font-size: 1.1rem; }
        """),
        Script("""
            document.addEventListener('htmx:beforeRequest', () =>
                document.getElementById('global-loader').style.display = 'block');
            document.addEventListener('htmx:afterRequest', () =>
                document.getElementById('global-loader').style.display = 'none');

            function filterTable(tableId) {
                const input = document.getElementById(tableId + '-filter');
                const filter = input.value.toLowerCase();
                const tbody = document.getElementById(tableId + '-body');
                const rows = tbody.getElementsByTagName('tr');

                for (let row of rows) {
                    const firstCell = row.getElementsByTagName('td')[0];
                    if (firstCell) {
                        const text = firstCell.textContent.toLowerCase();
                        row.style.display = text.includes(filter) ? '' : 'none';
                    }
                }
            }

            // Escape closes the secret form
            document.addEventListener('keydown', (e) => {
                if (e.key === 'Escape' && document.getElementById('modal-overlay')) {
                    htmx.ajax('POST', '/close-modal', {target: '#modal-container', swap: 'innerHTML'});
                }
            });
        """),
    ),
)

SESSION_KEY = "edit_session"


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def full_page_or_fragment(request: Request, content):
    """Return full page for direct requests, fragment for HTMX."""
    if request.headers.get("HX-Request"):
        return content
    return Title("Secret Manager"), page_layout(content)


def edit_controller(session) -> SecretEditController:
    """Build the form controller for this browser from its session cookie."""
    saved = session.get(SESSION_KEY)
    return SecretEditController(
        store,
        list_view,
        session=EditSession.from_dict(saved) if saved else None,
        logger=logger,
    )


def remember(session, controller: SecretEditController) -> None:
    """Store the controller's form state back in the session cookie."""
    if controller.session is None:
        session.pop(SESSION_KEY, None)
    else:
        session[SESSION_KEY] = controller.session.to_dict()


async def load_rows() -> tuple[list, Notice | None]:
    """Reload the list, falling back to the last known rows on failure."""
    try:
        return await list_view.load(), None
    except SecretClientError as e:
        return list_view.rows, Notice.error(e)


# -----------------------------------------------------------------------------
# Routes: List
# -----------------------------------------------------------------------------


@rt("/")
async def get():
    rows, notice = await load_rows()
    return Title("Secret Manager"), page_layout(secrets_content(rows, notice))


@rt("/secrets")
async def get(request: Request):
    rows, notice = await load_rows()
    return full_page_or_fragment(request, secrets_content(rows, notice))


@rt("/secrets/list")
async def get():
    rows, notice = await load_rows()
    if notice:
        return secret_table(rows), status_message(notice, oob=True)
    return secret_table(rows)


@rt("/secret/{name}")
def get(name: str):
    row = list_view.find(name)
    if row is None:
        return status_message(Notice.error(f"Secret {name} not found"), oob=True)
    return secret_details(row.secret)


# -----------------------------------------------------------------------------
# Routes: Form
# -----------------------------------------------------------------------------


@rt("/secrets/new")
def get(session):
    controller = edit_controller(session)
    form = secret_form(controller.open_create())
    remember(session, controller)
    return form


@rt("/secret/{name}/edit")
def get(session, name: str, key: str = "", value: str = ""):
    controller = edit_controller(session)
    form = secret_form(controller.open_edit(name, key, value))
    remember(session, controller)
    return form


@rt("/close-modal")
def post(session):
    controller = edit_controller(session)
    controller.close()
    remember(session, controller)
    return ""


@rt("/secrets/submit")
async def post(session, name: str = "", key: str = "", value: str = ""):
    controller = edit_controller(session)
    if controller.session is None:
        return "", status_message(Notice.error("The secret form is not open"), oob=True)

    notice = await controller.submit(controller.session.with_fields(name, key, value))
    remember(session, controller)

    if controller.is_open:
        return secret_form(controller.session), status_message(notice, oob=True)
    return "", status_message(notice, oob=True), secret_list_oob(list_view.rows)


# -----------------------------------------------------------------------------
# Routes: Delete
# -----------------------------------------------------------------------------


@rt("/secret/{name}")
async def delete(session, name: str):
    notice = await edit_controller(session).delete(name)
    if notice.level == "success":
        return status_message(notice), secret_list_oob(list_view.rows)
    return status_message(notice)


# -----------------------------------------------------------------------------
# Run
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    print(f"\n🔐 Secret Manager: http://localhost:{PORT}\n")
    serve(host="0.0.0.0", port=PORT)
