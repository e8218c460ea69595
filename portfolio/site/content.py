from __future__ import annotations

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ContentError(Exception):
    """Site content could not be read or failed validation."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid")


class Profile(_Model):
    name: str
    headline: str
    about: List[str] = Field(default_factory=list)


class TimelineEntry(_Model):
    role: str
    organisation: str
    period: str
    summary: str = ""


class Project(_Model):
    title: str
    summary: str
    url: str
    tags: List[str] = Field(default_factory=list)


class Contact(_Model):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$")
    intro: str = ""


class SiteContent(_Model):
    site_title: str
    profile: Profile
    timeline: List[TimelineEntry] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    contact: Contact


def load_content(path: Path | str) -> SiteContent:
    p = Path(path)
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ContentError(p, "content file not found") from None
    except yaml.YAMLError as e:
        raise ContentError(p, f"invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ContentError(p, "top level must be a mapping")
    try:
        return SiteContent.model_validate(raw)
    except ValidationError as e:
        raise ContentError(p, f"invalid content: {e}") from e
