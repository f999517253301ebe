# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Registry of the portfolio content kinds.

Storage backends and the API routers are both driven by this table, so a new
content kind only needs its schemas, an ORM model and one entry here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Type

from pydantic import BaseModel

from content import schemas


class EntityKind(str, Enum):
    SKILL_CATEGORIES = "skill_categories"
    SKILLS = "skills"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    OPEN_SOURCE = "open_source"
    PORTFOLIO_SETTINGS = "portfolio_settings"
    ABOUT_CONTENT = "about_content"
    CONTACT_INFO = "contact_info"


@dataclass(frozen=True)
class KindMeta:
    row: Type[BaseModel]
    create: Type[BaseModel]
    update: Type[BaseModel]
    label: str    # "Project" – used in "Project not found"
    plural: str   # "projects" – used in "Failed to fetch projects"
    ordered: bool = False     # has a display_order column
    singleton: bool = False   # at most one row


KINDS: Dict[EntityKind, KindMeta] = {
    EntityKind.SKILL_CATEGORIES: KindMeta(
        schemas.SkillCategoryRow, schemas.SkillCategoryCreate, schemas.SkillCategoryUpdate,
        "Skill category", "skill categories", ordered=True,
    ),
    EntityKind.SKILLS: KindMeta(
        schemas.SkillRow, schemas.SkillCreate, schemas.SkillUpdate,
        "Skill", "skills",
    ),
    EntityKind.EDUCATION: KindMeta(
        schemas.EducationRow, schemas.EducationCreate, schemas.EducationUpdate,
        "Education item", "education items", ordered=True,
    ),
    EntityKind.EXPERIENCE: KindMeta(
        schemas.ExperienceRow, schemas.ExperienceCreate, schemas.ExperienceUpdate,
        "Experience item", "experience items", ordered=True,
    ),
    EntityKind.PROJECTS: KindMeta(
        schemas.ProjectRow, schemas.ProjectCreate, schemas.ProjectUpdate,
        "Project", "projects", ordered=True,
    ),
    EntityKind.OPEN_SOURCE: KindMeta(
        schemas.OpenSourceContributionRow,
        schemas.OpenSourceContributionCreate,
        schemas.OpenSourceContributionUpdate,
        "Open source contribution", "open source contributions", ordered=True,
    ),
    EntityKind.PORTFOLIO_SETTINGS: KindMeta(
        schemas.PortfolioSettingsRow, schemas.PortfolioSettingsCreate, schemas.PortfolioSettingsUpdate,
        "Settings", "settings", singleton=True,
    ),
    EntityKind.ABOUT_CONTENT: KindMeta(
        schemas.AboutContentRow, schemas.AboutContentCreate, schemas.AboutContentUpdate,
        "About content", "about content", singleton=True,
    ),
    EntityKind.CONTACT_INFO: KindMeta(
        schemas.ContactInfoRow, schemas.ContactInfoCreate, schemas.ContactInfoUpdate,
        "Contact info", "contact info", singleton=True,
    ),
}
