"""
Unit tests for the in-memory UserStore.
"""
from __future__ import annotations

from users_api.app.schemas.user import UserData, is_valid_user_id
from users_api.app.services.user_store import UserStore, generate_user_id


def _data(**overrides) -> UserData:
    values = {"username": "Alice", "age": 30, "hobbies": ["chess"]}
    values.update(overrides)
    return UserData(**values)


def test_new_store_is_empty():
    store = UserStore()

    assert store.list_all() == []
    assert len(store) == 0


def test_insert_assigns_uuid_and_keeps_fields():
    store = UserStore()

    user = store.insert(_data())

    assert is_valid_user_id(user.id)
    assert (user.username, user.age, user.hobbies) == ("Alice", 30, ["chess"])
    assert store.find_by_id(user.id) is user


def test_generated_ids_are_unique():
    store = UserStore()

    ids = {store.insert(_data(username=f"user{i}")).id for i in range(50)}

    assert len(ids) == 50
    assert all(is_valid_user_id(user_id) for user_id in ids)


def test_generate_user_id_is_lowercase_canonical():
    user_id = generate_user_id()

    assert len(user_id) == 36
    assert user_id == user_id.lower()


def test_list_all_keeps_insertion_order_and_is_a_copy():
    store = UserStore()
    names = ["a", "b", "c"]
    for name in names:
        store.insert(_data(username=name))

    listed = store.list_all()
    listed.clear()

    assert [user.username for user in store.list_all()] == names


def test_find_by_id_unknown_returns_none():
    store = UserStore()
    store.insert(_data())

    assert store.find_by_id(generate_user_id()) is None


def test_id_factory_is_injectable():
    store = UserStore(id_factory=lambda: "00000000-0000-0000-0000-000000000001")

    user = store.insert(_data())

    assert user.id == "00000000-0000-0000-0000-000000000001"


def test_replace_overwrites_truthy_fields_and_keeps_id():
    store = UserStore()
    user = store.insert(_data())

    updated = store.replace(user.id, _data(username="Bob", age=41, hobbies=["go", "tea"]))

    assert updated.id == user.id
    assert (updated.username, updated.age, updated.hobbies) == ("Bob", 41, ["go", "tea"])
    assert store.find_by_id(user.id).username == "Bob"


def test_replace_skips_missing_fields():
    store = UserStore()
    user = store.insert(_data())

    updated = store.replace(user.id, {"username": "Bob"})

    assert (updated.username, updated.age, updated.hobbies) == ("Bob", 30, ["chess"])


def test_replace_ignores_zero_like_values():
    store = UserStore()
    user = store.insert(_data())

    updated = store.replace(user.id, {"username": "", "age": 0, "hobbies": []})

    assert (updated.username, updated.age, updated.hobbies) == ("Alice", 30, ["chess"])


def test_replace_unknown_id_returns_none():
    store = UserStore()

    assert store.replace(generate_user_id(), _data()) is None


def test_remove_drops_only_that_user():
    store = UserStore()
    first = store.insert(_data(username="first"))
    second = store.insert(_data(username="second"))

    store.remove(first.id)

    assert store.find_by_id(first.id) is None
    assert store.list_all() == [second]


def test_remove_unknown_id_is_a_noop():
    store = UserStore()
    user = store.insert(_data())

    store.remove(generate_user_id())

    assert store.list_all() == [user]


def test_clear_empties_the_store():
    store = UserStore()
    store.insert(_data())

    store.clear()

    assert len(store) == 0
