"""Structured resume document accepted by the ATS scoring engine.

Shaped after JSON Resume. Keys may arrive in camelCase (``startDate``,
``layoutSettings``) or snake_case, unknown keys are ignored and ``null``
values fall back to the field default, so partially filled documents from
the editor validate without errors.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ResumeModel(BaseModel):
    """Base for all resume sections: camelCase aliases, nulls dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Location(ResumeModel):
    address: str = ""
    postal_code: str = ""
    region: str = ""
    city: str = ""
    country: str = ""


class Profile(ResumeModel):
    network: str = ""
    username: str = ""
    url: str = ""


class Basics(ResumeModel):
    name: str = ""
    label: str = ""
    image: str | bool = ""  # data url or blob reference; non-empty means a photo is shown
    email: str = ""
    phone: str = ""
    url: str = ""
    summary: str = ""
    location: Location = Location()
    profiles: list[Profile] = []


class WorkExperience(ResumeModel):
    id: str = ""
    company: str = ""
    position: str = ""
    url: str = ""
    start_date: str = ""
    end_date: str = ""
    summary: str = ""
    highlights: list[str] = []


class Education(ResumeModel):
    id: str = ""
    institution: str = ""
    url: str = ""
    area: str = ""
    study_type: str = ""
    start_date: str = ""
    end_date: str = ""
    score: str = ""
    summary: str = ""
    courses: list[str] = []


class Skill(ResumeModel):
    id: str = ""
    name: str = ""
    level: str = ""
    keywords: list[str] = []


class Project(ResumeModel):
    id: str = ""
    name: str = ""
    description: str = ""
    highlights: list[str] = []
    keywords: list[str] = []
    start_date: str = ""
    end_date: str = ""
    url: str = ""


class Certificate(ResumeModel):
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""
    summary: str = ""


class Language(ResumeModel):
    id: str = ""
    language: str = ""
    fluency: str = ""


class Interest(ResumeModel):
    id: str = ""
    name: str = ""
    keywords: list[str] = []


class Publication(ResumeModel):
    id: str = ""
    name: str = ""
    publisher: str = ""
    release_date: str = ""
    url: str = ""
    summary: str = ""


class Award(ResumeModel):
    id: str = ""
    title: str = ""
    date: str = ""
    awarder: str = ""
    summary: str = ""


class Reference(ResumeModel):
    id: str = ""
    name: str = ""
    position: str = ""
    reference: str = ""


class CustomItem(ResumeModel):
    id: str = ""
    name: str = ""
    description: str = ""
    date: str = ""
    url: str = ""
    summary: str = ""


class CustomSection(ResumeModel):
    id: str = ""
    name: str = ""
    items: list[CustomItem] = []


class LayoutSettings(ResumeModel):
    """Only the layout fields that influence ATS parsing are modelled."""

    column_count: int = 1
    header_position: str = "top"  # top | left | right
    section_heading_icons: str = "none"  # none | outline | filled
    section_titles: dict[str, str | None] = {}


class ResumeMeta(ResumeModel):
    title: str = ""
    template_id: str = ""
    layout_settings: LayoutSettings = LayoutSettings()


class ResumeDocument(ResumeModel):
    id: str = ""
    meta: ResumeMeta = ResumeMeta()
    basics: Basics = Basics()
    work: list[WorkExperience] = []
    education: list[Education] = []
    skills: list[Skill] = []
    projects: list[Project] = []
    certificates: list[Certificate] = []
    languages: list[Language] = []
    interests: list[Interest] = []
    publications: list[Publication] = []
    awards: list[Award] = []
    references: list[Reference] = []
    custom: list[CustomSection] = []
