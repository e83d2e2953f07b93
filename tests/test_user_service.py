from tests.conftest import register


def test_register_user(user_api):
    resp = register(user_api, "alice", "alice1", avatar_url="https://img/a.png")
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == "alice"
    assert body["username"] == "alice1"
    assert body["avatar_url"] == "https://img/a.png"
    assert body["cover_url"] is None


def test_duplicate_username_rejected_regardless_of_id(user_api):
    assert register(user_api, "alice", "alice1").status_code == 201

    for user_id in ("alice", "someone-else"):
        resp = register(user_api, user_id, "alice1")
        assert resp.status_code == 409
        assert "alice1" in resp.json()["detail"]


def test_rejected_registration_leaves_existing_profile(user_api, user_store):
    register(user_api, "alice", "alice1", bio="original")
    register(user_api, "mallory", "alice1", bio="impostor")

    assert user_api.get("/users/mallory").status_code == 404
    assert user_api.get("/users/alice").json()["bio"] == "original"
    assert len(user_store) == 1


def test_username_match_is_case_sensitive(user_api):
    assert register(user_api, "alice", "alice1").status_code == 201
    assert register(user_api, "alice-2", "Alice1").status_code == 201


def test_reregistering_id_with_free_username_overwrites(user_api, user_store):
    register(user_api, "alice", "alice1", bio="first")
    resp = register(user_api, "alice", "alice2", bio="second")

    assert resp.status_code == 201
    profile = user_api.get("/users/alice").json()
    assert profile["username"] == "alice2"
    assert profile["bio"] == "second"
    assert len(user_store) == 1


def test_update_profile_keeps_id_and_username(user_api):
    register(user_api, "alice", "alice1")
    resp = user_api.put(
        "/users/alice",
        json={"name": "Alice A.", "bio": "hello", "cover_url": "https://img/c.png"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == "alice"
    assert body["username"] == "alice1"
    assert body["name"] == "Alice A."
    assert body["bio"] == "hello"
    assert body["cover_url"] == "https://img/c.png"
    assert user_api.get("/users/alice").json() == body


def test_update_unknown_profile_is_not_found(user_api, user_store):
    resp = user_api.put("/users/ghost", json={"name": "Ghost", "bio": ""})
    assert resp.status_code == 404
    assert len(user_store) == 0


def test_get_unknown_user(user_api):
    resp = user_api.get("/users/ghost")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "User not found"


def test_health(user_api):
    assert user_api.get("/health").json() == {"status": "ok", "service": "user-service"}
