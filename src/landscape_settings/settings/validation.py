from __future__ import annotations

import logging
import re
from typing import Sequence

from landscape_settings.settings.errors import SettingsRuleError, SettingsValidationError
from landscape_settings.settings.models import Category, Colors, FeaturedItemRule, Group, LandscapeSettings

logger = logging.getLogger(__name__)

_CHANNEL = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_ALPHA = r"(?:1(?:\.0*)?|0(?:\.\d*)?|\.\d+)"
_SEP = r"\s*,\s*"

RGBA = re.compile(
    rf"rgba\(\s*{_CHANNEL}{_SEP}{_CHANNEL}{_SEP}{_CHANNEL}{_SEP}{_ALPHA}\s*\)"
    rf"|rgb\(\s*{_CHANNEL}{_SEP}{_CHANNEL}{_SEP}{_CHANNEL}\s*\)"
)

RGBA_FORMAT_EXAMPLE = "rgba(0, 107, 204, 1)"


def is_valid_color(value: str) -> bool:
    return RGBA.fullmatch(value) is not None


def validate_settings(settings: LandscapeSettings) -> None:
    """
    Run the structural checks on settings, in a fixed order, stopping at the
    first violation.

    Order: foundation, members category, categories, colors, featured items,
    groups. The violation is raised as the cause of a SettingsValidationError.
    """
    try:
        _validate_foundation(settings.foundation)
        _validate_members_category(settings.members_category)
        _validate_categories(settings.categories or [])
        if settings.colors is not None:
            _validate_colors(settings.colors)
        _validate_featured_items(settings.featured_items or [])
        _validate_groups(settings.groups or [])
    except SettingsRuleError as exc:
        logger.debug("Landscape settings validation failed. foundation=%s error=%s", settings.foundation, exc)
        raise SettingsValidationError("the settings provided are not valid") from exc


def _validate_foundation(foundation: str) -> None:
    if not foundation:
        raise SettingsRuleError("foundation cannot be empty")


def _validate_members_category(members_category: str | None) -> None:
    if members_category is not None and not members_category:
        raise SettingsRuleError("members category cannot be empty")


def _identifier(name: str, index: int) -> str:
    return name if name else str(index)


def _validate_categories(categories: Sequence[Category]) -> None:
    for index, category in enumerate(categories):
        category_id = _identifier(category.name, index)
        try:
            if not category.name:
                raise SettingsRuleError("name cannot be empty")
            for sub_index, subcategory in enumerate(category.subcategories):
                if not subcategory:
                    raise SettingsRuleError(f"subcategory [{sub_index}] name cannot be empty")
        except SettingsRuleError as exc:
            raise SettingsRuleError(f"category [{category_id}] is not valid") from exc


def _validate_colors(colors: Colors) -> None:
    slots = (
        ("color1", colors.color1),
        ("color2", colors.color2),
        ("color3", colors.color3),
        ("color4", colors.color4),
        ("color5", colors.color5),
        ("color6", colors.color6),
    )
    for name, value in slots:
        if not is_valid_color(value):
            raise SettingsRuleError(f'{name} is not valid (format: "{RGBA_FORMAT_EXAMPLE}")')


def _validate_featured_items(rules: Sequence[FeaturedItemRule]) -> None:
    for index, rule in enumerate(rules):
        rule_id = _identifier(rule.field, index)
        try:
            if not rule.field:
                raise SettingsRuleError("field cannot be empty")
            if not rule.options:
                raise SettingsRuleError("options cannot be empty")
            for option_index, option in enumerate(rule.options):
                if not option.value:
                    raise SettingsRuleError(f"option [{option_index}] value cannot be empty")
                if option.label is not None and not option.label:
                    raise SettingsRuleError(f"option [{option_index}] label cannot be empty")
        except SettingsRuleError as exc:
            raise SettingsRuleError(f"featured item rule [{rule_id}] is not valid") from exc


def _validate_groups(groups: Sequence[Group]) -> None:
    for index, group in enumerate(groups):
        group_id = _identifier(group.name, index)
        try:
            if not group.name:
                raise SettingsRuleError("name cannot be empty")
            for category_index, category_name in enumerate(group.categories):
                if not category_name:
                    raise SettingsRuleError(f"category [{category_index}] name cannot be empty")
        except SettingsRuleError as exc:
            raise SettingsRuleError(f"group [{group_id}] is not valid") from exc
