"""
Soft-delete CRUD over the reference tables.

The four multilingual lookups share one code path; video tutorials have
their own create/update because their columns differ.
"""
from typing import Optional, Type
from sqlalchemy.orm import Session
from fiftyhertz.core.config import settings
from fiftyhertz.core.database import unit_of_work
from fiftyhertz.core.exceptions import ConflictError, NotFoundError, ValidationError
from fiftyhertz.models import CropType, Harvester, LandSizeUnit, TransportArrangement, VideoTutorial
from fiftyhertz.models.enums import RecordStatus
from fiftyhertz.models.reference import NAME_COLUMNS


def _get_or_404(db: Session, model: Type, record_id, label: str):
    record = db.query(model).filter(model.id == record_id).first()
    if record is None:
        raise NotFoundError(f"{label} not found")
    return record


def _require_id(record_id) -> int:
    if not record_id:
        raise ValidationError("id is required")
    return record_id


def _require_names(names: dict, message: str) -> dict:
    values = {column: names.get(column) for column in NAME_COLUMNS}
    if not all(values.values()):
        raise ValidationError(message)
    return values


def validate_language(language_code: Optional[str]) -> str:
    if not language_code:
        raise ValidationError("language code is required")
    # Only codes backed by a name column can be listed
    if language_code not in settings.SUPPORTED_LANGUAGES or f"name_{language_code}" not in NAME_COLUMNS:
        raise ValidationError("Invalid language code")
    return language_code


# ==================== Multilingual lookups ====================

def create_lookup(db: Session, model: Type, names: dict) -> dict:
    values = _require_names(names, "All language fields are required")
    with unit_of_work(db):
        record = model(**values, status=RecordStatus.ACTIVE)
        db.add(record)
        db.flush()
        result = {"id": record.id, **values}
    return result


def update_lookup(db: Session, model: Type, label: str, record_id, names: dict) -> dict:
    if not record_id:
        raise ValidationError("id and all language fields are required")
    values = _require_names(names, "id and all language fields are required")
    with unit_of_work(db):
        record = _get_or_404(db, model, record_id, label)
        for column, value in values.items():
            setattr(record, column, value)
    return {"id": record_id, **values}


def list_active(db: Session, model: Type) -> list:
    rows = db.query(model).filter(model.status == RecordStatus.ACTIVE).order_by(model.id).all()
    return [row.to_dict() for row in rows]


def list_by_language(db: Session, model: Type, language_code: Optional[str]) -> list:
    """Active rows as {id, name} in the requested language"""
    language_code = validate_language(language_code)
    column = getattr(model, f"name_{language_code}")
    rows = (
        db.query(model.id, column)
        .filter(model.status == RecordStatus.ACTIVE)
        .order_by(model.id)
        .all()
    )
    return [{"id": row_id, "name": name} for row_id, name in rows]


# ==================== Shared soft delete ====================

def soft_delete(db: Session, model: Type, label: str, record_id) -> dict:
    record_id = _require_id(record_id)
    with unit_of_work(db):
        record = _get_or_404(db, model, record_id, label)
        if not record.is_active:
            raise ConflictError(f"{label} is already deleted")
        record.status = RecordStatus.DELETED
    return {"id": record_id}


def restore(db: Session, model: Type, label: str, record_id) -> dict:
    record_id = _require_id(record_id)
    with unit_of_work(db):
        record = _get_or_404(db, model, record_id, label)
        if record.is_active:
            raise ConflictError(f"{label} is already active")
        record.status = RecordStatus.ACTIVE
    return {"id": record_id}


# ==================== Video tutorials ====================

def create_video_tutorial(db: Session, video_url: Optional[str], language_code: Optional[str]) -> dict:
    if not video_url or not language_code:
        raise ValidationError("videoUrl and languageCode are required")
    with unit_of_work(db):
        tutorial = VideoTutorial(video_url=video_url, language_code=language_code, status=RecordStatus.ACTIVE)
        db.add(tutorial)
        db.flush()
        tutorial_id = tutorial.id
    return {"id": tutorial_id, "videoUrl": video_url, "languageCode": language_code}


def update_video_tutorial(db: Session, tutorial_id, video_url: Optional[str], language_code: Optional[str]) -> dict:
    tutorial_id = _require_id(tutorial_id)
    if not video_url and not language_code:
        raise ValidationError("At least one of videoUrl or languageCode must be provided")
    with unit_of_work(db):
        tutorial = _get_or_404(db, VideoTutorial, tutorial_id, "Video tutorial")
        tutorial.video_url = video_url or tutorial.video_url
        tutorial.language_code = language_code or tutorial.language_code
        result = {"id": tutorial_id, "videoUrl": tutorial.video_url, "languageCode": tutorial.language_code}
    return result


def video_tutorials_by_language(db: Session, language_code: Optional[str]) -> list:
    if not language_code:
        raise ValidationError("language code is required")
    rows = (
        db.query(VideoTutorial)
        .filter(VideoTutorial.language_code == language_code, VideoTutorial.status == RecordStatus.ACTIVE)
        .order_by(VideoTutorial.id)
        .all()
    )
    return [row.to_dict() for row in rows]


def all_video_tutorials(db: Session) -> list:
    return [row.to_dict() for row in db.query(VideoTutorial).order_by(VideoTutorial.id).all()]


# ==================== Home screen ====================

def home_data(db: Session) -> dict:
    return {
        "landSizeUnits": list_active(db, LandSizeUnit),
        "harvesters": list_active(db, Harvester),
        "cropTypes": list_active(db, CropType),
        "transportArrangements": list_active(db, TransportArrangement),
    }
