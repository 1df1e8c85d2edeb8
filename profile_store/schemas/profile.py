"""
Pydantic models for Profile request validation.

Field names are camelCase to match the JSON the frontend sends. Unknown
fields are dropped and numbers are coerced to strings.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


# =============================================================================
# Request Schemas
# =============================================================================

class SocialLinks(BaseModel):
    """Links to the profile owner's external pages."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    telegram: Optional[str] = None
    tiktok: Optional[str] = None
    youtube: Optional[str] = None
    whatsapp: Optional[str] = None
    maps: Optional[str] = None
    snapchat: Optional[str] = None


class _ProfileFields(BaseModel):
    """Fields shared by the create and update bodies."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    jobTitle: Optional[str] = None
    profileImage: Optional[str] = None
    headerImage: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    socialLinks: Optional[SocialLinks] = None

    def to_document(self) -> dict:
        """Stored fields; values left out of the request are omitted."""
        return self.model_dump(exclude_none=True)


class ProfileCreateRequest(_ProfileFields):
    """POST /api/save-profile"""
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class ProfileUpdateRequest(_ProfileFields):
    """
    PUT /api/update-profile/{profileKey}

    Full replace: every field is optional and omitted fields are removed.
    """
    name: Optional[str] = None
