# tests/test_user_store.py

import pytest

from taskez.errors import Conflict, NotFound
from taskez.services.users import UserStore
from taskez.utils.security import hash_password, verify_password


def test_password_hash_is_one_way():
    digest = hash_password("secret")
    assert digest != "secret"
    assert verify_password("secret", digest)
    assert not verify_password("Secret", digest)
    assert not verify_password("secret", "not-a-hash")


async def test_register_then_authenticate(user_store: UserStore):
    user = await user_store.register("u1", "p", "Alice")
    assert user.user_id > 0
    assert user.password_hash != "p"

    logged_in = await user_store.authenticate("u1", "p")
    assert logged_in.user_id == user.user_id
    assert logged_in.name == "Alice"


@pytest.mark.parametrize("password,name", [("p", "Alice"), ("other", "Someone else")])
async def test_duplicate_login_key_conflicts(user_store: UserStore, password, name):
    await user_store.register("u1", "p", "Alice")
    with pytest.raises(Conflict):
        await user_store.register("u1", password, name)


async def test_authenticate_failures_share_status(user_store: UserStore):
    await user_store.register("u1", "p", "Alice")

    with pytest.raises(NotFound) as wrong_password:
        await user_store.authenticate("u1", "nope")
    with pytest.raises(NotFound) as unknown_user:
        await user_store.authenticate("ghost", "p")

    assert wrong_password.value.status_code == 401
    assert unknown_user.value.status_code == 401
    assert wrong_password.value.message == unknown_user.value.message


async def test_lookup(user_store: UserStore):
    user = await user_store.register("u1", "p", "Alice")
    assert (await user_store.get_by_login_key("u1")).user_id == user.user_id
    assert (await user_store.get_by_id(user.user_id)).login_key == "u1"

    with pytest.raises(NotFound):
        await user_store.get_by_login_key("ghost")
    with pytest.raises(NotFound):
        await user_store.get_by_id(999)


async def test_password_is_hashed_before_a_session_opens(sessionmaker, monkeypatch):
    events = []

    def factory():
        events.append("session")
        return sessionmaker()

    def fake_hash(password):
        events.append("hash")
        return hash_password(password)

    monkeypatch.setattr("taskez.services.users.hash_password", fake_hash)
    user = await UserStore(factory).register("u1", "p", "Alice")

    assert events == ["hash", "session"]
    assert verify_password("p", user.password_hash)
