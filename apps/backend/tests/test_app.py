"""App wiring: startup config errors, health, users and documents listing."""

from __future__ import annotations

import pytest

from writewell import db
from writewell.application import create_app
from writewell.core.config import Settings
from writewell.core.errors import ConfigurationError
from writewell.models.user import Document, User


def test_missing_api_key_fails_at_startup():
    with pytest.raises(ConfigurationError):
        create_app(Settings(openai_api_key="", database_url="sqlite://"))


def test_root_and_health(make_client, fake_llm_cls):
    client = make_client(fake_llm_cls())

    assert client.get("/").json() == {"message": "API running!"}
    assert client.get("/health").json() == {"status": "ok"}


def test_debug_runtime_never_leaks_key(make_client, fake_llm_cls):
    body = make_client(fake_llm_cls()).get("/debug/runtime").json()

    assert body["openai_key_present"] is True
    assert body["openai_key_len"] == len("sk-test")
    assert "sk-test" not in str(body)


def test_users_listing_hides_password(make_client, fake_llm_cls):
    client = make_client(fake_llm_cls())

    with db.SessionLocal() as session:
        session.add(User(email="ada@example.com", password="hashed"))
        session.commit()

    users = client.get("/users").json()

    assert len(users) == 1
    assert users[0]["email"] == "ada@example.com"
    assert "password" not in users[0]


def test_user_documents_listing(make_client, fake_llm_cls):
    client = make_client(fake_llm_cls())

    with db.SessionLocal() as session:
        user = User(email="grace@example.com", password="hashed")
        session.add(user)
        session.flush()
        session.add(Document(user_id=user.id, title="Draft", content="Once upon a time"))
        session.commit()
        user_id = str(user.id)

    docs = client.get(f"/users/{user_id}/documents").json()

    assert [d["title"] for d in docs] == ["Draft"]
    assert docs[0]["user_id"] == user_id


def test_documents_for_unknown_user_is_404(make_client, fake_llm_cls):
    client = make_client(fake_llm_cls())

    r = client.get("/users/00000000-0000-0000-0000-000000000000/documents")

    assert r.status_code == 404
