"""Reusable UI components."""

from fasthtml.common import *

from .config import NAMESPACE

# -----------------------------------------------------------------------------
# Layout
# -----------------------------------------------------------------------------


def page_layout(*content):
    """Render the full page layout."""
    return Div(
        Div(id="global-loader", style="display: none;"),
        _header(),
        Main(
            *content,
            id="main-content",
            style="flex: 1; padding: 0.5rem; overflow: hidden; min-width: 0;",
        ),
        Div(id="modal-container"),
        style="display: flex; flex-direction: column; min-height: 100vh;",
    )


def _header():
    """Render the header bar."""
    return Div(
        Span("🔐 Secret Manager", style="font-weight: bold; font-size: 1.1rem;"),
        Span(
            f"namespace: {NAMESPACE}",
            style="color: var(--pico-muted-color); font-size: 0.85rem;",
        ),
        style="display: flex; justify-content: space-between; align-items: center; padding: 0.5rem; border-bottom: 1px solid var(--pico-muted-border-color);",
    )


# -----------------------------------------------------------------------------
# Modal
# -----------------------------------------------------------------------------


def modal(title: str, *content):
    """Render content in a modal dialog.

    Clicking the close button, or the overlay around the dialog, closes it.
    """
    return Div(
        Div(
            Div(
                H3(title, id="modal-title", style="margin: 0;"),
                Button(
                    "✕",
                    hx_post="/close-modal",
                    hx_target="#modal-container",
                    hx_swap="innerHTML",
                    cls="close",
                    style="background: none; border: none; font-size: 1.5rem; cursor: pointer; padding: 0; line-height: 1; color: inherit;",
                ),
                style="display: flex; justify-content: space-between; align-items: center; margin-bottom: 0.5rem;",
            ),
            *content,
            style="background: var(--pico-background-color); padding: 1rem; border-radius: 8px; max-width: 800px; width: 90%; max-height: 85vh; overflow: auto; display: flex; flex-direction: column;",
        ),
        hx_post="/close-modal",
        hx_target="#modal-container",
        hx_swap="innerHTML",
        hx_trigger="click[target.id=='modal-overlay']",
        id="modal-overlay",
        style="position: fixed; top: 0; left: 0; right: 0; bottom: 0; background: rgba(0,0,0,0.5); display: flex; justify-content: center; align-items: center; z-index: 1000;",
    )


def manifest_modal(content: str, title: str):
    """Render a read-only manifest in a modal dialog."""
    return modal(
        title,
        Pre(
            Code(content),
            style="background: var(--pico-code-background-color); padding: 0.5rem; overflow: auto; max-height: 70vh; margin: 0; white-space: pre; font-size: 0.85rem;",
        ),
    )


# -----------------------------------------------------------------------------
# Tables
# -----------------------------------------------------------------------------


def resource_table(headers: list[str], rows: list, body_id: str | None = None):
    """Render a table with headers and rows."""
    return Table(
        Thead(Tr(*[Th(h) for h in headers])),
        Tbody(*rows, id=body_id),
    )


def filterable_table(headers: list[str], rows: list, table_id: str):
    """Render a table with a text box filtering rows on their first cell."""
    return Div(
        Input(
            type="search",
            id=f"{table_id}-filter",
            placeholder="Filter by name...",
            onkeyup=f"filterTable('{table_id}')",
            style="margin-bottom: 0.5rem;",
        ),
        resource_table(headers, rows, body_id=f"{table_id}-body"),
    )


def link(text: str, hx_get: str, hx_target: str = "#modal-container", hx_swap: str = "innerHTML"):
    """Render a clickable link."""
    return A(
        text,
        hx_get=hx_get,
        hx_target=hx_target,
        hx_swap=hx_swap,
        style="cursor: pointer; text-decoration: underline; color: var(--pico-primary);",
    )
