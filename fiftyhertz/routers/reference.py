"""
Reference data endpoints: lookups, video tutorials and home data
"""
from typing import Optional, Type
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from fiftyhertz.core.config import settings
from fiftyhertz.core.database import get_db
from fiftyhertz.core.responses import success
from fiftyhertz.core.security import AuthContext, authenticate, require_admin
from fiftyhertz.models import CropType, Harvester, LandSizeUnit, TransportArrangement, VideoTutorial
from fiftyhertz.schemas import LanguageRequest, LookupNamesRequest, RecordIdRequest, VideoTutorialRequest
from fiftyhertz.services import reference

router = APIRouter(prefix=settings.API_PREFIX, tags=["reference"])


def _register_lookup_mutations(model: Type, name: str, label: str) -> None:
    """
    Add create/update/delete/restore routes for a multilingual lookup.

    name is the CamelCase suffix of the paths, e.g. CropType for /createCropType.
    """

    def create(body: LookupNamesRequest, db: Session = Depends(get_db), admin: AuthContext = Depends(require_admin)):
        result = reference.create_lookup(db, model, body.names())
        return success(f"{label} created successfully", result, code=201)

    def update(body: LookupNamesRequest, db: Session = Depends(get_db), admin: AuthContext = Depends(require_admin)):
        result = reference.update_lookup(db, model, label, body.id, body.names())
        return success(f"{label} updated successfully", result)

    def delete(body: RecordIdRequest, db: Session = Depends(get_db), admin: AuthContext = Depends(require_admin)):
        result = reference.soft_delete(db, model, label, body.id)
        return success(f"{label} deleted successfully", result)

    def restore(body: RecordIdRequest, db: Session = Depends(get_db), admin: AuthContext = Depends(require_admin)):
        result = reference.restore(db, model, label, body.id)
        return success(f"{label} restored successfully", result)

    router.add_api_route(f"/create{name}", create, methods=["POST"], name=f"create{name}")
    router.add_api_route(f"/update{name}", update, methods=["PUT"], name=f"update{name}")
    router.add_api_route(f"/delete{name}", delete, methods=["DELETE"], name=f"delete{name}")
    router.add_api_route(f"/restore{name}", restore, methods=["PATCH"], name=f"restore{name}")


_register_lookup_mutations(CropType, "CropType", "Crop type")
_register_lookup_mutations(Harvester, "Harvester", "Harvester")
_register_lookup_mutations(TransportArrangement, "TransportArrangement", "Transport arrangement")
_register_lookup_mutations(LandSizeUnit, "LandSizeUnit", "Land size unit")


def _query_language(
    languageCode: Optional[str] = Query(None),
    language_code: Optional[str] = Query(None),
) -> Optional[str]:
    return languageCode or language_code


# ==================== Lookup listings ====================

@router.get("/getCropTypes")
def get_crop_types(db: Session = Depends(get_db)):
    return success("Crop types fetched successfully", {"cropTypes": reference.list_active(db, CropType)})


@router.post("/getCropTypesByLanguage")
def get_crop_types_by_language(body: LanguageRequest, db: Session = Depends(get_db)):
    rows = reference.list_by_language(db, CropType, body.language_code)
    return success("Crop types fetched successfully", {"cropTypes": rows})


@router.get("/getHarvestersByLanguage")
def get_harvesters_by_language(language_code: Optional[str] = Depends(_query_language), db: Session = Depends(get_db)):
    rows = reference.list_by_language(db, Harvester, language_code)
    return success("Harvesters fetched successfully", {"harvesters": rows})


@router.get("/getTransportArrangementsByLanguage")
def get_transport_arrangements_by_language(
    language_code: Optional[str] = Depends(_query_language),
    db: Session = Depends(get_db),
):
    rows = reference.list_by_language(db, TransportArrangement, language_code)
    return success("Transport arrangements fetched successfully", {"transportArrangements": rows})


@router.post("/getLandSizeUnitByLanguage")
def get_land_size_unit_by_language(body: LanguageRequest, db: Session = Depends(get_db)):
    rows = reference.list_by_language(db, LandSizeUnit, body.language_code)
    return success("Land size units fetched successfully", {"landSizeUnits": rows})


# ==================== Video tutorials ====================

@router.post("/createVideoTutorial")
def create_video_tutorial(
    body: VideoTutorialRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
):
    result = reference.create_video_tutorial(db, body.video_url, body.language_code)
    return success("Video tutorial created successfully", result, code=201)


@router.put("/updateVideoTutorial")
def update_video_tutorial(
    body: VideoTutorialRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
):
    result = reference.update_video_tutorial(db, body.id, body.video_url, body.language_code)
    return success("Video tutorial updated successfully", result)


@router.delete("/deleteVideoTutorial")
def delete_video_tutorial(
    body: RecordIdRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
):
    result = reference.soft_delete(db, VideoTutorial, "Video tutorial", body.id)
    return success("Video tutorial deleted successfully", result)


@router.patch("/restoreVideoTutorial")
def restore_video_tutorial(
    body: RecordIdRequest,
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
):
    result = reference.restore(db, VideoTutorial, "Video tutorial", body.id)
    return success("Video tutorial restored successfully", result)


@router.post("/getVideoTutorialByLanguageCode")
def get_video_tutorial_by_language_code(body: LanguageRequest, db: Session = Depends(get_db)):
    rows = reference.video_tutorials_by_language(db, body.language_code)
    return success("Video tutorials fetched successfully", {"videoTutorials": rows})


@router.get("/getAllVideoTutorial")
def get_all_video_tutorial(db: Session = Depends(get_db)):
    return success("All video tutorials fetched successfully", {"videoTutorials": reference.all_video_tutorials(db)})


# ==================== Home ====================

@router.get("/getHomeData")
def get_home_data(auth: AuthContext = Depends(authenticate), db: Session = Depends(get_db)):
    return success("Home data fetched successfully", reference.home_data(db))
