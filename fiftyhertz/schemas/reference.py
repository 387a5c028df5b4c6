"""
Request bodies for the reference data endpoints
"""
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


class LookupNamesRequest(BaseModel):
    id: Optional[int] = None
    name_en: Optional[str] = None
    name_pa: Optional[str] = None
    name_bgc_in: Optional[str] = None
    name_hi: Optional[str] = None
    name_raj_in: Optional[str] = None

    def names(self) -> dict:
        return self.model_dump(exclude={"id"})


class RecordIdRequest(BaseModel):
    id: Optional[int] = None


class LanguageRequest(BaseModel):
    language_code: Optional[str] = Field(None, validation_alias=AliasChoices("languageCode", "language_code"))


class VideoTutorialRequest(BaseModel):
    id: Optional[int] = None
    video_url: Optional[str] = Field(None, validation_alias=AliasChoices("videoUrl", "video_url"))
    language_code: Optional[str] = Field(None, validation_alias=AliasChoices("languageCode", "language_code"))
