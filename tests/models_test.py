"""Tests for the secret model and form sessions."""

import pytest

from secret_manager.exceptions import DecodeError
from secret_manager.models import EditSession, Mode, Secret


def test_secret_from_json() -> None:
    secret = Secret.from_json(
        {
            "name": "db-pass",
            "namespace": "sman",
            "labels": None,
            "data": {"user": "a", "pass": "b"},
        }
    )
    assert secret.name == "db-pass"
    assert list(secret.data.items()) == [("user", "a"), ("pass", "b")]
    assert secret.labels == {}
    assert secret.to_payload() == {
        "name": "db-pass",
        "namespace": "sman",
        "data": {"user": "a", "pass": "b"},
    }


def test_secret_null_data() -> None:
    secret = Secret.from_json({"name": "empty", "namespace": "sman", "data": None})
    assert secret.data == {}


@pytest.mark.parametrize(
    "obj",
    [
        "db-pass",
        {"namespace": "sman", "data": {}},
        {"name": 7, "namespace": "sman", "data": {}},
        {"name": "db-pass", "namespace": "sman", "data": {"port": 5432}},
        {"name": "db-pass", "namespace": "sman", "data": ["user", "a"]},
    ],
)
def test_secret_invalid(obj: object) -> None:
    with pytest.raises(DecodeError):
        Secret.from_json(obj)


def test_session_modes() -> None:
    create = EditSession.create()
    assert create.mode is Mode.CREATE
    assert (create.name, create.key, create.value) == ("", "", "")

    edit = EditSession.edit("db-pass", "user", "a")
    assert edit.mode is Mode.EDIT
    typed = edit.with_fields("db-pass", "pass", "c")
    assert typed.mode is Mode.EDIT
    assert edit.key == "user"

    secret = typed.to_secret("sman")
    assert secret.to_payload() == {"name": "db-pass", "namespace": "sman", "data": {"pass": "c"}}


def test_session_dict() -> None:
    session = EditSession.edit("db-pass", "user", "a")
    data = session.to_dict()
    assert data == {"mode": "edit", "name": "db-pass", "key": "user", "value": "a"}
    assert EditSession.from_dict(data) == session
