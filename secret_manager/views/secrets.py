"""Secrets views."""

import json
from urllib.parse import quote

import yaml
from fasthtml.common import *

from ..components import filterable_table, link, manifest_modal, modal
from ..config import NAMESPACE
from ..controller import Notice
from ..list_view import SecretRow
from ..models import EditSession, Mode, Secret


def secrets_content(rows: list[SecretRow], notice: Notice | None = None):
    """Render the secrets page body."""
    return Div(
        Div(
            H2("Secrets", style="margin: 0;"),
            Div(
                Button(
                    "New Secret",
                    id="createNewSecretBtn",
                    hx_get="/secrets/new",
                    hx_target="#modal-container",
                    hx_swap="innerHTML",
                ),
                Button(
                    "Refresh",
                    cls="secondary",
                    hx_get="/secrets/list",
                    hx_target="#secret-list",
                    hx_swap="innerHTML",
                    hx_sync="#secret-list:replace",
                ),
                style="display: flex; gap: 0.5rem;",
            ),
            style="display: flex; justify-content: space-between; align-items: center; margin-bottom: 1rem;",
        ),
        status_message(notice),
        Div(secret_table(rows), id="secret-list"),
    )


def secret_table(rows: list[SecretRow]):
    """Render the table of secrets, or a placeholder when there are none."""
    if not rows:
        return P(f"No secrets found in the {NAMESPACE} namespace.")

    headers = ["Name", "Data", "Actions"]
    return filterable_table(headers, [secret_row(row) for row in rows], "secrets-table")


def secret_list_oob(rows: list[SecretRow]):
    """Render the secret table for an out-of-band swap."""
    return Div(secret_table(rows), id="secret-list", hx_swap_oob="true")


def secret_row(row: SecretRow):
    """Render a single secret row with its edit and delete actions."""
    path = f"/secret/{quote(row.name, safe='')}"
    return Tr(
        Td(link(row.name, path)),
        Td(row.summary),
        Td(
            Span(
                "✏️",
                cls="edit",
                title="Edit",
                hx_get=f"{path}/edit",
                hx_vals=json.dumps({"key": row.first_key, "value": row.first_value}),
                hx_target="#modal-container",
                hx_swap="innerHTML",
                style="cursor: pointer; margin-right: 0.5rem;",
            ),
            Span(
                "🗑️",
                cls="delete",
                title="Delete",
                hx_delete=path,
                hx_target="#status-message",
                hx_swap="outerHTML",
                style="cursor: pointer;",
            ),
            cls="actions",
        ),
    )


def status_message(notice: Notice | None = None, oob: bool = False):
    """Render the status line, hidden until there is something to say."""
    attrs = {"hx_swap_oob": "true"} if oob else {}
    if notice is None:
        return Div(id="status-message", style="visibility: hidden;", **attrs)
    color = "#2e7d32" if notice.level == "success" else "#c62828"
    return Div(
        notice.text,
        id="status-message",
        cls=notice.level,
        role="status",
        style=f"visibility: visible; color: {color}; margin-bottom: 0.5rem;",
        **attrs,
    )


def secret_form(session: EditSession):
    """Render the create/edit form for an open session."""
    title = "Create New Secret" if session.mode is Mode.CREATE else "Edit Secret"
    return modal(
        title,
        Form(
            Label("Secret Name", Input(type="text", name="name", id="secretName", value=session.name, required=True)),
            Label("Key", Input(type="text", name="key", id="dataKey", value=session.key, required=True)),
            Label("Value", Input(type="text", name="value", id="dataValue", value=session.value, required=True)),
            Button("Save", type="submit"),
            id="secretForm",
            hx_post="/secrets/submit",
            hx_target="#modal-container",
            hx_swap="innerHTML",
        ),
    )


def secret_details(secret: Secret):
    """Render a secret as YAML in a modal."""
    manifest = yaml.safe_dump(secret.model_dump(), default_flow_style=False, sort_keys=False)
    return manifest_modal(manifest, f"Secret: {secret.name}")
