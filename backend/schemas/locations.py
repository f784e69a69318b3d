from pydantic import BaseModel, field_validator
from typing import Optional
from uuid import UUID


class LocationRead(BaseModel):
    id: UUID
    zone: str
    shelf: str
    bin: Optional[str] = None
    code: str


class LocationCreate(BaseModel):
    zone: str
    shelf: str
    bin: Optional[str] = None

    @field_validator("zone", "shelf")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v

    @field_validator("bin")
    @classmethod
    def _strip_nullable(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class LocationUpdate(BaseModel):
    zone: Optional[str] = None
    shelf: Optional[str] = None
    bin: Optional[str] = None

    @field_validator("zone", "shelf")
    @classmethod
    def _strip_optional(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty")
        return v

    @field_validator("bin")
    @classmethod
    def _strip_nullable_bin(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None
