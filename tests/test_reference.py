"""
Tests for reference data endpoints
"""
import pytest
from fiftyhertz.core.config import settings
from fiftyhertz.models import CropType, Harvester, LandSizeUnit, TransportArrangement, VideoTutorial
from fiftyhertz.models.enums import RecordStatus

PREFIX = "/api/v1"

NAMES = {
    "name_en": "Wheat",
    "name_pa": "ਕਣਕ",
    "name_bgc_in": "गेहूं",
    "name_hi": "गेहूँ",
    "name_raj_in": "गेहूं",
}

LOOKUPS = [
    ("CropType", CropType, "Crop type"),
    ("Harvester", Harvester, "Harvester"),
    ("TransportArrangement", TransportArrangement, "Transport arrangement"),
    ("LandSizeUnit", LandSizeUnit, "Land size unit"),
]


def _add(db_session, model, status=RecordStatus.ACTIVE, **names):
    record = model(**{**NAMES, **names}, status=status)
    db_session.add(record)
    db_session.commit()
    return record.id


@pytest.mark.parametrize("name,model,label", LOOKUPS)
def test_create_lookup(client, admin_headers, db_session, name, model, label):
    response = client.post(f"{PREFIX}/create{name}", json=NAMES, headers=admin_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["code"] == 201
    assert data["message"] == f"{label} created successfully"
    assert data["payload"]["name_en"] == "Wheat"

    record = db_session.get(model, data["payload"]["id"])
    assert record.status == RecordStatus.ACTIVE
    assert record.name_pa == "ਕਣਕ"


@pytest.mark.parametrize("name,model,label", LOOKUPS)
def test_lookup_mutations_require_admin(client, user_headers, name, model, label):
    assert client.post(f"{PREFIX}/create{name}", json=NAMES, headers=user_headers).status_code == 403
    assert client.put(f"{PREFIX}/update{name}", json={"id": 1, **NAMES}, headers=user_headers).status_code == 403
    assert client.request("DELETE", f"{PREFIX}/delete{name}", json={"id": 1}, headers=user_headers).status_code == 403
    assert client.patch(f"{PREFIX}/restore{name}", json={"id": 1}, headers=user_headers).status_code == 403
    assert client.post(f"{PREFIX}/create{name}", json=NAMES).status_code == 401


def test_create_lookup_missing_name(client, admin_headers):
    body = dict(NAMES)
    del body["name_hi"]
    response = client.post(f"{PREFIX}/createHarvester", json=body, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "All language fields are required"


def test_update_lookup(client, admin_headers, db_session):
    record_id = _add(db_session, CropType)
    response = client.put(
        f"{PREFIX}/updateCropType",
        json={"id": record_id, **NAMES, "name_en": "Rice"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["payload"]["name_en"] == "Rice"

    db_session.expire_all()
    assert db_session.get(CropType, record_id).name_en == "Rice"


def test_update_lookup_not_found(client, admin_headers):
    response = client.put(f"{PREFIX}/updateCropType", json={"id": 999, **NAMES}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Crop type not found"


def test_update_lookup_requires_id(client, admin_headers):
    response = client.put(f"{PREFIX}/updateLandSizeUnit", json=NAMES, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "id and all language fields are required"


def test_soft_delete_and_restore(client, admin_headers, db_session):
    record_id = _add(db_session, TransportArrangement)

    response = client.request("DELETE", f"{PREFIX}/deleteTransportArrangement", json={"id": record_id}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["payload"] == {"id": record_id}
    db_session.expire_all()
    assert db_session.get(TransportArrangement, record_id).status == RecordStatus.DELETED

    again = client.request("DELETE", f"{PREFIX}/deleteTransportArrangement", json={"id": record_id}, headers=admin_headers)
    assert again.status_code == 400
    assert again.json()["message"] == "Transport arrangement is already deleted"

    response = client.patch(f"{PREFIX}/restoreTransportArrangement", json={"id": record_id}, headers=admin_headers)
    assert response.status_code == 200
    db_session.expire_all()
    assert db_session.get(TransportArrangement, record_id).status == RecordStatus.ACTIVE

    again = client.patch(f"{PREFIX}/restoreTransportArrangement", json={"id": record_id}, headers=admin_headers)
    assert again.status_code == 400
    assert again.json()["message"] == "Transport arrangement is already active"


def test_delete_requires_id(client, admin_headers):
    response = client.request("DELETE", f"{PREFIX}/deleteHarvester", json={}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "id is required"


def test_restore_not_found(client, admin_headers):
    response = client.patch(f"{PREFIX}/restoreHarvester", json={"id": 42}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Harvester not found"


def test_get_crop_types(client, db_session):
    active = _add(db_session, CropType)
    _add(db_session, CropType, status=RecordStatus.DELETED, name_en="Barley")

    response = client.get(f"{PREFIX}/getCropTypes")
    assert response.status_code == 200
    crop_types = response.json()["payload"]["cropTypes"]
    assert [row["id"] for row in crop_types] == [active]
    assert crop_types[0]["name_hi"] == "गेहूँ"


def test_get_crop_types_by_language(client, db_session):
    record_id = _add(db_session, CropType)
    response = client.post(f"{PREFIX}/getCropTypesByLanguage", json={"languageCode": "pa"})
    assert response.status_code == 200
    assert response.json()["payload"] == {"cropTypes": [{"id": record_id, "name": "ਕਣਕ"}]}


def test_get_by_language_empty(client):
    response = client.post(f"{PREFIX}/getLandSizeUnitByLanguage", json={"language_code": "en"})
    assert response.status_code == 200
    assert response.json()["payload"] == {"landSizeUnits": []}


@pytest.mark.parametrize("body,message", [
    ({}, "language code is required"),
    ({"languageCode": "fr"}, "Invalid language code"),
    ({"languageCode": "en; DROP TABLE crop_types"}, "Invalid language code"),
])
def test_get_by_language_rejects_bad_code(client, body, message):
    response = client.post(f"{PREFIX}/getCropTypesByLanguage", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == message


def test_get_harvesters_by_language_query(client, db_session):
    record_id = _add(db_session, Harvester, name_en="Combine")
    response = client.get(f"{PREFIX}/getHarvestersByLanguage", params={"languageCode": "en"})
    assert response.status_code == 200
    assert response.json()["payload"]["harvesters"] == [{"id": record_id, "name": "Combine"}]

    response = client.get(f"{PREFIX}/getHarvestersByLanguage", params={"language_code": "raj_in"})
    assert response.status_code == 200

    response = client.get(f"{PREFIX}/getHarvestersByLanguage")
    assert response.status_code == 400


def test_get_transport_arrangements_by_language(client, db_session):
    record_id = _add(db_session, TransportArrangement, name_hi="ट्रैक्टर")
    response = client.get(f"{PREFIX}/getTransportArrangementsByLanguage", params={"languageCode": "hi"})
    assert response.json()["payload"]["transportArrangements"] == [{"id": record_id, "name": "ट्रैक्टर"}]


def test_video_tutorial_lifecycle(client, admin_headers, db_session):
    created = client.post(
        f"{PREFIX}/createVideoTutorial",
        json={"videoUrl": "https://videos.example.com/intro.mp4", "languageCode": "hi"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    tutorial_id = created.json()["payload"]["id"]
    assert created.json()["payload"] == {
        "id": tutorial_id,
        "videoUrl": "https://videos.example.com/intro.mp4",
        "languageCode": "hi",
    }

    updated = client.put(
        f"{PREFIX}/updateVideoTutorial",
        json={"id": tutorial_id, "videoUrl": "https://videos.example.com/intro-v2.mp4"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["payload"]["videoUrl"] == "https://videos.example.com/intro-v2.mp4"
    assert updated.json()["payload"]["languageCode"] == "hi"

    listed = client.post(f"{PREFIX}/getVideoTutorialByLanguageCode", json={"languageCode": "hi"})
    assert [row["id"] for row in listed.json()["payload"]["videoTutorials"]] == [tutorial_id]

    deleted = client.request("DELETE", f"{PREFIX}/deleteVideoTutorial", json={"id": tutorial_id}, headers=admin_headers)
    assert deleted.status_code == 200

    listed = client.post(f"{PREFIX}/getVideoTutorialByLanguageCode", json={"languageCode": "hi"})
    assert listed.json()["payload"]["videoTutorials"] == []

    everything = client.get(f"{PREFIX}/getAllVideoTutorial")
    assert everything.json()["payload"]["videoTutorials"][0]["status"] == "0"

    restored = client.patch(f"{PREFIX}/restoreVideoTutorial", json={"id": tutorial_id}, headers=admin_headers)
    assert restored.status_code == 200


def test_create_video_tutorial_missing_fields(client, admin_headers):
    response = client.post(f"{PREFIX}/createVideoTutorial", json={"videoUrl": "x"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "videoUrl and languageCode are required"


def test_update_video_tutorial_needs_a_field(client, admin_headers, db_session):
    tutorial = VideoTutorial(video_url="u", language_code="en")
    db_session.add(tutorial)
    db_session.commit()
    response = client.put(f"{PREFIX}/updateVideoTutorial", json={"id": tutorial.id}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "At least one of videoUrl or languageCode must be provided"


def test_video_tutorial_mutations_require_admin(client, user_headers):
    response = client.post(
        f"{PREFIX}/createVideoTutorial",
        json={"videoUrl": "u", "languageCode": "en"},
        headers=user_headers,
    )
    assert response.status_code == 403


def test_get_home_data(client, user_headers, db_session):
    _add(db_session, CropType)
    _add(db_session, Harvester)
    _add(db_session, Harvester, status=RecordStatus.DELETED)
    _add(db_session, LandSizeUnit, name_en="Acre")

    response = client.get(f"{PREFIX}/getHomeData", headers=user_headers)
    assert response.status_code == 200
    payload = response.json()["payload"]
    assert set(payload) == {"landSizeUnits", "harvesters", "cropTypes", "transportArrangements"}
    assert len(payload["cropTypes"]) == 1
    assert len(payload["harvesters"]) == 1
    assert payload["landSizeUnits"][0]["name_en"] == "Acre"
    assert payload["transportArrangements"] == []


def test_language_without_name_column_is_rejected(client, db_session, monkeypatch):
    """Test a configured language with no matching column is a client error"""
    monkeypatch.setattr(settings, "SUPPORTED_LANGUAGES", settings.SUPPORTED_LANGUAGES + ["ta"])
    _add(db_session, Harvester)

    response = client.get(f"{PREFIX}/getHarvestersByLanguage", params={"languageCode": "ta"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid language code"

    response = client.post(f"{PREFIX}/getCropTypesByLanguage", json={"languageCode": "ta"})
    assert response.status_code == 400
