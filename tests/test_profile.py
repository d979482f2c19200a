from storefront.services.profile_service import ProfileService


def test_missing_profile_is_none(db):
    assert ProfileService(db).get_profile("alice") is None


def test_partial_saves_do_not_clobber(db):
    svc = ProfileService(db)

    svc.save_profile("alice", {"city": "X"})
    svc.save_profile("alice", {"state": "Y"})

    db.expire_all()
    profile = svc.get_profile("alice")
    assert profile.city == "X"
    assert profile.state == "Y"
    assert profile.first_name is None


def test_explicit_null_clears_field(db):
    svc = ProfileService(db)

    svc.save_profile("alice", {"phone": "555-0100", "city": "Oslo"})
    svc.save_profile("alice", {"phone": None})

    db.expire_all()
    profile = svc.get_profile("alice")
    assert profile.phone is None
    assert profile.city == "Oslo"


def test_unknown_fields_are_ignored(db):
    svc = ProfileService(db)

    svc.save_profile("alice", {"user_id": "mallory", "country": "NO"})

    db.expire_all()
    assert svc.get_profile("alice").country == "NO"
    assert svc.get_profile("mallory") is None


def test_empty_save_creates_blank_profile(db):
    svc = ProfileService(db)

    svc.save_profile("alice", {})
    svc.save_profile("alice", {})

    profile = svc.get_profile("alice")
    assert profile is not None
    assert profile.city is None


def test_profile_over_http(client, auth):
    assert client.get("/api/profile").status_code == 401
    assert client.post("/api/profile", json={"city": "X"}).status_code == 401

    resp = client.get("/api/profile", headers=auth("alice"))
    assert resp.status_code == 200
    assert resp.json() == {}

    resp = client.post("/api/profile", json={"first_name": "Alice", "city": "X"}, headers=auth("alice"))
    assert resp.status_code == 200
    assert resp.json() == {"message": "Profile updated successfully"}

    client.post("/api/profile", json={"state": "Y"}, headers=auth("alice"))

    profile = client.get("/api/profile", headers=auth("alice")).json()
    assert profile["user_id"] == "alice"
    assert profile["first_name"] == "Alice"
    assert profile["city"] == "X"
    assert profile["state"] == "Y"
    assert profile["zip_code"] is None

    assert client.get("/api/profile", headers=auth("bob")).json() == {}


def test_profile_rejects_wrong_types(client, auth):
    resp = client.post("/api/profile", json={"city": 12}, headers=auth("alice"))

    assert resp.status_code == 400


def test_empty_strings_become_null_on_first_save(db):
    svc = ProfileService(db)

    svc.save_profile("alice", {"first_name": "", "city": "Oslo"})

    db.expire_all()
    profile = svc.get_profile("alice")
    assert profile.first_name is None
    assert profile.city == "Oslo"


def test_empty_string_is_kept_on_update(db):
    svc = ProfileService(db)
    svc.save_profile("alice", {"city": "Oslo"})

    svc.save_profile("alice", {"city": ""})

    db.expire_all()
    assert svc.get_profile("alice").city == ""
