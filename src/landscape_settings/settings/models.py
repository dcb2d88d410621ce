"""
Types used to represent the landscape settings, usually provided from a YAML
file (settings.yml). These settings customize some aspects of the landscape,
like the groups shown in the web application, the categories that belong to
each of them, or the criteria used to highlight items.

The settings file uses a format that is not backwards compatible with the
legacy settings file used by existing landscapes.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field


class Images(BaseModel):
    model_config = ConfigDict(frozen=True)

    favicon: Optional[str] = None
    footer_logo: Optional[str] = None
    header_logo: Optional[str] = None
    open_graph: Optional[str] = None


class SocialNetworks(BaseModel):
    model_config = ConfigDict(frozen=True)

    facebook: Optional[str] = None
    flickr: Optional[str] = None
    github: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    slack: Optional[str] = None
    twitch: Optional[str] = None
    twitter: Optional[str] = None
    wechat: Optional[str] = None
    youtube: Optional[str] = None


class Colors(BaseModel):
    """Colors used across the landscape UI."""

    model_config = ConfigDict(frozen=True)

    color1: str
    color2: str
    color3: str
    color4: str
    color5: str
    color6: str


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    subcategories: list[str] = Field(default_factory=list)


class Group(BaseModel):
    """
    Landscape group.

    A group organizes sets of categories in the web application. Categories are
    referenced by name only.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    categories: list[str]


class FeaturedItemRuleOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: Optional[str] = None
    order: Optional[int] = Field(default=None, ge=0)


class FeaturedItemRule(BaseModel):
    """
    Featured item rule.

    A featured item is specially highlighted in the web application, usually
    larger and with some special styling. Rules decide which items are featured
    based on the value of one of their fields.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    options: list[FeaturedItemRuleOption]


class GridItemsSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class LandscapeSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    foundation: str
    images: Images

    categories: Optional[list[Category]] = None
    colors: Optional[Colors] = None
    featured_items: Optional[list[FeaturedItemRule]] = None
    grid_items_size: Optional[GridItemsSize] = None
    groups: Optional[list[Group]] = None
    members_category: Optional[str] = None
    social_networks: Optional[SocialNetworks] = None

    def to_dict(self) -> dict:
        # Absent fields are omitted, not written as nulls.
        return self.model_dump(mode="json", exclude_none=True)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)
