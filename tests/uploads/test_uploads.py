"""
Tests for Cloudinary upload signing and image link storage.
"""
import hashlib
from datetime import datetime, timezone
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from carepass.config import settings
from carepass.database import get_db
from carepass.main import app
from carepass.uploads.models import ImageLinks
from carepass.uploads.service import issue_upload_signature

SECRET = "cloudinary-test-secret"

IMAGES = {
    "headshotUrl": "https://res.cloudinary.com/carepass-test/image/upload/headshot.jpg",
    "galleryUrl": "https://res.cloudinary.com/carepass-test/image/upload/gallery.jpg",
    "reviewsUrl": "https://res.cloudinary.com/carepass-test/image/upload/reviews.jpg",
}


def expected_signature(timestamp):
    return hashlib.sha1(f"timestamp={timestamp}{SECRET}".encode()).hexdigest()


def test_issue_upload_signature_floors_timestamp():
    now = datetime(2026, 1, 1, 0, 0, 0, 900000, tzinfo=timezone.utc)

    params = issue_upload_signature(settings, now)

    assert params.timestamp == 1767225600
    assert params.signature == expected_signature(1767225600)
    assert params.api_key == "123456789012345"
    assert params.cloud_name == "carepass-test"


def test_signature_endpoint(client):
    response = client.post("/signature")

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"timestamp", "signature", "apiKey", "cloudName"}
    assert isinstance(data["timestamp"], int)
    assert data["signature"] == expected_signature(data["timestamp"])
    assert data["signature"] == data["signature"].lower()
    assert data["apiKey"] == "123456789012345"
    assert data["cloudName"] == "carepass-test"


def test_signature_requires_no_token(client):
    response = client.post("/signature", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 200


def test_save_images(client, db):
    response = client.post("/save", json=IMAGES)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Images saved successfully"
    record = db.query(ImageLinks).filter(ImageLinks.id == data["id"]).one()
    assert record.headshot_url == IMAGES["headshotUrl"]
    assert record.gallery_url == IMAGES["galleryUrl"]
    assert record.reviews_url == IMAGES["reviewsUrl"]


def test_save_images_missing_field_is_400(client, db):
    for field in IMAGES:
        payload = {k: v for k, v in IMAGES.items() if k != field}
        response = client.post("/save", json=payload)
        assert response.status_code == 400
    assert db.query(ImageLinks).count() == 0


def test_save_images_empty_field_is_400(client):
    response = client.post("/save", json={**IMAGES, "galleryUrl": ""})
    assert response.status_code == 400


def test_save_images_storage_failure_is_500(client):
    broken_db = MagicMock()
    broken_db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))
    app.dependency_overrides[get_db] = lambda: broken_db

    response = client.post("/save", json=IMAGES)

    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "Failed to save images"
    assert data["detail"] == "Failed to save images"
    assert "disk I/O error" in data["error"]
    broken_db.rollback.assert_called_once()
