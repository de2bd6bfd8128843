"""
Tests for waitlist signup.
"""
from carepass.waitlist.models import WaitlistEntry


def test_join_waitlist(client, db):
    response = client.post("/waitlist", json={"email": "Sam@Example.com", "name": "Sam"})

    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "sam@example.com"
    assert data["name"] == "Sam"
    assert db.query(WaitlistEntry).count() == 1


def test_join_waitlist_twice_conflicts(client):
    client.post("/waitlist", json={"email": "sam@example.com"})
    response = client.post("/waitlist", json={"email": "SAM@example.com"})
    assert response.status_code == 409


def test_join_waitlist_invalid_email(client):
    response = client.post("/waitlist", json={"email": "not-an-email"})
    assert response.status_code == 400
