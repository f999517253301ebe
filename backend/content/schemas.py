# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Pydantic request / response models for the portfolio content.

Every entity kind comes in three shapes:

* ``<Kind>Row``    – what the storage layer returns and the API serialises.
* ``<Kind>Create`` – POST body.  Required fields are required, every optional
                     field carries the default applied at creation time.
* ``<Kind>Update`` – PUT body.  Everything optional; only the fields the
                     client actually sent are applied (``exclude_unset``).

The wire format is camelCase (``displayOrder``, ``categoryId`` …) while the
Python attributes stay snake_case; ``populate_by_name`` accepts both.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_PRIMARY = "#3b82f6"
DEFAULT_VARIANT = "professional"
DEFAULT_APPEARANCE = "system"
DEFAULT_RADIUS = 8
DEFAULT_SITE_TITLE = "Software Developer Portfolio"

# display_order is an INT column on every SQL backend
MAX_DISPLAY_ORDER = 2 ** 31 - 1

_HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"

Variant = Literal["professional", "tint", "vibrant"]
Appearance = Literal["light", "dark", "system"]


class _Schema(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def _not_null(value):
    # Update bodies may omit a required column but never blank it out
    if value is None:
        raise ValueError("may not be null")
    return value


# -- Nested ------------------------------------------------------------------


class ExpertiseItem(_Schema):
    icon: Optional[str] = None
    title: str
    description: Optional[str] = None


# -- Portfolio settings (singleton) -----------------------------------------


class PortfolioSettingsRow(_Schema):
    id: Optional[int] = None  # None until the first write
    primary: str
    variant: str
    appearance: str
    radius: int
    site_title: str
    logo: Optional[str] = None
    updated_at: Optional[datetime] = None


class PortfolioSettingsCreate(_Schema):
    primary: str = Field(DEFAULT_PRIMARY, pattern=_HEX_COLOR)
    variant: Variant = DEFAULT_VARIANT
    appearance: Appearance = DEFAULT_APPEARANCE
    radius: int = Field(DEFAULT_RADIUS, ge=0, le=20)
    site_title: str = Field(DEFAULT_SITE_TITLE, min_length=1, max_length=100)
    logo: Optional[str] = Field(None, max_length=255)


class PortfolioSettingsUpdate(_Schema):
    primary: Optional[str] = Field(None, pattern=_HEX_COLOR)
    variant: Optional[Variant] = None
    appearance: Optional[Appearance] = None
    radius: Optional[int] = Field(None, ge=0, le=20)
    site_title: Optional[str] = Field(None, min_length=1, max_length=100)
    logo: Optional[str] = Field(None, max_length=255)

    @field_validator("primary", "variant", "appearance", "radius", "site_title")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


# -- Skill categories ----------------------------------------------------------


class SkillCategoryRow(_Schema):
    id: int
    name: str
    icon: str
    display_order: int


class SkillCategoryCreate(_Schema):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str = Field(..., min_length=1, max_length=50)
    display_order: int = Field(0, ge=0, le=MAX_DISPLAY_ORDER)


class SkillCategoryUpdate(_Schema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    icon: Optional[str] = Field(None, min_length=1, max_length=50)
    display_order: Optional[int] = Field(None, ge=0, le=MAX_DISPLAY_ORDER)

    @field_validator("name", "icon", "display_order")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


# -- Skills ----------------------------------------------------------------------


class SkillRow(_Schema):
    id: int
    name: str
    level: int
    category_id: int


class SkillCreate(_Schema):
    name: str = Field(..., min_length=1, max_length=100)
    level: int = Field(..., ge=1, le=100)
    category_id: int


class SkillUpdate(_Schema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    level: Optional[int] = Field(None, ge=1, le=100)
    category_id: Optional[int] = None

    @field_validator("name", "level", "category_id")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


# -- Education -------------------------------------------------------------------


class EducationRow(_Schema):
    id: int
    degree: str
    institution: str
    location: Optional[str] = None
    period: Optional[str] = None
    description: Optional[str] = None
    courses: List[str] = []
    achievements: Optional[str] = None
    display_order: int


class EducationCreate(_Schema):
    degree: str = Field(..., min_length=1, max_length=150)
    institution: str = Field(..., min_length=1, max_length=150)
    location: Optional[str] = Field(None, max_length=100)
    period: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    courses: List[str] = Field(default_factory=list)
    achievements: Optional[str] = None
    display_order: int = Field(0, ge=0, le=MAX_DISPLAY_ORDER)


class EducationUpdate(_Schema):
    degree: Optional[str] = Field(None, min_length=1, max_length=150)
    institution: Optional[str] = Field(None, min_length=1, max_length=150)
    location: Optional[str] = Field(None, max_length=100)
    period: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    courses: Optional[List[str]] = None
    achievements: Optional[str] = None
    display_order: Optional[int] = Field(None, ge=0, le=MAX_DISPLAY_ORDER)

    @field_validator("degree", "institution", "courses", "display_order")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


# -- Experience ------------------------------------------------------------------


class ExperienceRow(_Schema):
    id: int
    title: str
    company: str
    period: Optional[str] = None
    responsibilities: List[str] = []
    display_order: int


class ExperienceCreate(_Schema):
    title: str = Field(..., min_length=1, max_length=150)
    company: str = Field(..., min_length=1, max_length=150)
    period: Optional[str] = Field(None, max_length=50)
    responsibilities: List[str] = Field(default_factory=list)
    display_order: int = Field(0, ge=0, le=MAX_DISPLAY_ORDER)


class ExperienceUpdate(_Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=150)
    company: Optional[str] = Field(None, min_length=1, max_length=150)
    period: Optional[str] = Field(None, max_length=50)
    responsibilities: Optional[List[str]] = None
    display_order: Optional[int] = Field(None, ge=0, le=MAX_DISPLAY_ORDER)

    @field_validator("title", "company", "responsibilities", "display_order")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


# -- Projects --------------------------------------------------------------------


class ProjectRow(_Schema):
    id: int
    title: str
    period: Optional[str] = None
    description: Optional[str] = None
    technologies: List[str] = []
    image: Optional[str] = None
    demo_link: Optional[str] = None
    code_link: Optional[str] = None
    display_order: int
    featured: bool = False


class ProjectCreate(_Schema):
    title: str = Field(..., min_length=1, max_length=150)
    period: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    image: Optional[str] = Field(None, max_length=255)
    demo_link: Optional[str] = Field(None, max_length=255)
    code_link: Optional[str] = Field(None, max_length=255)
    display_order: int = Field(0, ge=0, le=MAX_DISPLAY_ORDER)
    featured: bool = False


class ProjectUpdate(_Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=150)
    period: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    technologies: Optional[List[str]] = None
    image: Optional[str] = Field(None, max_length=255)
    demo_link: Optional[str] = Field(None, max_length=255)
    code_link: Optional[str] = Field(None, max_length=255)
    display_order: Optional[int] = Field(None, ge=0, le=MAX_DISPLAY_ORDER)
    featured: Optional[bool] = None

    @field_validator("title", "technologies", "display_order", "featured")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


class ProjectReorderRequest(_Schema):
    project_ids: List[int]


# -- Open source contributions -----------------------------------------------


class OpenSourceContributionRow(_Schema):
    id: int
    title: str
    description: Optional[str] = None
    link: Optional[str] = None
    link_text: Optional[str] = None
    icon: Optional[str] = None
    display_order: int


class OpenSourceContributionCreate(_Schema):
    title: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    link: Optional[str] = Field(None, max_length=255)
    link_text: Optional[str] = Field(None, max_length=100)
    icon: Optional[str] = Field(None, max_length=50)
    display_order: int = Field(0, ge=0, le=MAX_DISPLAY_ORDER)


class OpenSourceContributionUpdate(_Schema):
    title: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    link: Optional[str] = Field(None, max_length=255)
    link_text: Optional[str] = Field(None, max_length=100)
    icon: Optional[str] = Field(None, max_length=50)
    display_order: Optional[int] = Field(None, ge=0, le=MAX_DISPLAY_ORDER)

    @field_validator("title", "display_order")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


# -- About content (singleton) -----------------------------------------------


class AboutContentRow(_Schema):
    id: Optional[int] = None
    journey_text: Optional[str] = None
    quote: Optional[str] = None
    expertise_items: List[ExpertiseItem] = []
    traits: List[str] = []


class AboutContentCreate(_Schema):
    journey_text: Optional[str] = None
    quote: Optional[str] = None
    expertise_items: List[ExpertiseItem] = Field(default_factory=list)
    traits: List[str] = Field(default_factory=list)


class AboutContentUpdate(_Schema):
    journey_text: Optional[str] = None
    quote: Optional[str] = None
    expertise_items: Optional[List[ExpertiseItem]] = None
    traits: Optional[List[str]] = None

    @field_validator("expertise_items", "traits")
    @classmethod
    def reject_null(cls, value):
        return _not_null(value)


# -- Contact info (singleton) ------------------------------------------------


class ContactInfoRow(_Schema):
    id: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    stackoverflow: Optional[str] = None


class ContactInfoCreate(_Schema):
    email: Optional[str] = Field(None, max_length=150)
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=150)
    github: Optional[str] = Field(None, max_length=255)
    linkedin: Optional[str] = Field(None, max_length=255)
    stackoverflow: Optional[str] = Field(None, max_length=255)


# Every contact field is nullable, so the create shape doubles as the patch shape
ContactInfoUpdate = ContactInfoCreate
