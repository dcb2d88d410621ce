import unittest

from landscape_settings.settings import (
    LandscapeSettings,
    SettingsRuleError,
    SettingsValidationError,
    validate_settings,
)
from landscape_settings.settings.validation import is_valid_color

VALID_COLORS = {
    "color1": "rgba(0, 107, 204, 1)",
    "color2": "rgba(255, 0, 170, 1)",
    "color3": "rgb(0, 83, 155)",
    "color4": "rgba(0, 0, 0, 0.5)",
    "color5": "rgba(245,245,245,.25)",
    "color6": "rgba(1, 2, 3, 0)",
}


def _settings(**overrides) -> LandscapeSettings:
    data = {"foundation": "CNCF", "images": {}}
    data.update(overrides)
    return LandscapeSettings.model_validate(data)


class SettingsValidationTests(unittest.TestCase):
    def assert_invalid(self, settings: LandscapeSettings, *messages: str) -> None:
        with self.assertRaises(SettingsValidationError) as ctx:
            validate_settings(settings)
        self.assertEqual(str(ctx.exception), "the settings provided are not valid")
        cause = ctx.exception.__cause__
        for message in messages:
            self.assertIsInstance(cause, SettingsRuleError)
            self.assertEqual(str(cause), message)
            cause = cause.__cause__
        self.assertIsNone(cause)

    def test_minimal_settings_are_valid(self) -> None:
        validate_settings(_settings())

    def test_full_settings_are_valid(self) -> None:
        settings = _settings(
            members_category="Members",
            categories=[{"name": "Runtime", "subcategories": ["Container Runtime", "Cloud Native Storage"]}],
            colors=VALID_COLORS,
            featured_items=[
                {
                    "field": "maturity",
                    "options": [
                        {"value": "graduated", "label": "Graduated", "order": 1},
                        {"value": "incubating", "order": 2},
                    ],
                }
            ],
            grid_items_size="medium",
            groups=[{"name": "Projects", "categories": ["Runtime", "Provisioning"]}],
        )
        validate_settings(settings)

    def test_empty_foundation(self) -> None:
        self.assert_invalid(_settings(foundation=""), "foundation cannot be empty")

    def test_empty_foundation_reported_before_other_errors(self) -> None:
        settings = _settings(
            foundation="",
            members_category="",
            colors=dict(VALID_COLORS, color1="red"),
            groups=[{"name": "", "categories": [""]}],
        )
        self.assert_invalid(settings, "foundation cannot be empty")

    def test_empty_members_category(self) -> None:
        self.assert_invalid(_settings(members_category=""), "members category cannot be empty")

    def test_category_with_empty_name_is_identified_by_index(self) -> None:
        settings = _settings(categories=[{"name": "Runtime"}, {"name": "", "subcategories": ["Tools"]}])
        self.assert_invalid(settings, "category [1] is not valid", "name cannot be empty")

    def test_category_with_name_filled_in_is_valid(self) -> None:
        validate_settings(_settings(categories=[{"name": "Runtime"}, {"name": "Tools", "subcategories": ["CI"]}]))

    def test_category_with_empty_subcategory(self) -> None:
        settings = _settings(categories=[{"name": "Runtime", "subcategories": ["Container Runtime", ""]}])
        self.assert_invalid(settings, "category [Runtime] is not valid", "subcategory [1] name cannot be empty")

    def test_invalid_color_names_the_slot(self) -> None:
        for slot in VALID_COLORS:
            for value in ("red", "rgba(999,0,0,1)", "rgba(0,0,0,2)", "rgba(256, 0, 0, 1)", ""):
                with self.subTest(slot=slot, value=value):
                    settings = _settings(colors=dict(VALID_COLORS, **{slot: value}))
                    self.assert_invalid(settings, f'{slot} is not valid (format: "rgba(0, 107, 204, 1)")')

    def test_first_invalid_color_is_reported(self) -> None:
        settings = _settings(colors=dict(VALID_COLORS, color3="blue", color5="green"))
        self.assert_invalid(settings, 'color3 is not valid (format: "rgba(0, 107, 204, 1)")')

    def test_color_pattern(self) -> None:
        for value in VALID_COLORS.values():
            with self.subTest(value=value):
                self.assertTrue(is_valid_color(value))
        self.assertTrue(is_valid_color("rgba(0, 107, 204, 1.0)"))
        self.assertFalse(is_valid_color("rgba(0, 107, 204, 1.5)"))
        self.assertFalse(is_valid_color("rgba(0, 107, 204)"))
        self.assertFalse(is_valid_color("#006bcc"))
        self.assertFalse(is_valid_color("rgba(00, 0, 0, 1)"))

    def test_featured_item_rule_without_options(self) -> None:
        settings = _settings(featured_items=[{"field": "maturity", "options": []}])
        self.assert_invalid(settings, "featured item rule [maturity] is not valid", "options cannot be empty")

    def test_featured_item_rule_with_empty_field_is_identified_by_index(self) -> None:
        settings = _settings(
            featured_items=[
                {"field": "maturity", "options": [{"value": "graduated"}]},
                {"field": "", "options": [{"value": "x"}]},
            ]
        )
        self.assert_invalid(settings, "featured item rule [1] is not valid", "field cannot be empty")

    def test_featured_item_option_with_empty_value(self) -> None:
        settings = _settings(featured_items=[{"field": "maturity", "options": [{"value": "graduated"}, {"value": ""}]}])
        self.assert_invalid(
            settings, "featured item rule [maturity] is not valid", "option [1] value cannot be empty"
        )

    def test_featured_item_option_with_empty_label(self) -> None:
        settings = _settings(featured_items=[{"field": "maturity", "options": [{"value": "graduated", "label": ""}]}])
        self.assert_invalid(
            settings, "featured item rule [maturity] is not valid", "option [0] label cannot be empty"
        )

    def test_group_with_empty_category_name(self) -> None:
        settings = _settings(groups=[{"name": "Projects", "categories": ["Runtime", ""]}])
        self.assert_invalid(settings, "group [Projects] is not valid", "category [1] name cannot be empty")

    def test_group_with_empty_name_is_identified_by_index(self) -> None:
        settings = _settings(groups=[{"name": "", "categories": ["Runtime"]}])
        self.assert_invalid(settings, "group [0] is not valid", "name cannot be empty")

    def test_group_categories_are_not_checked_against_categories(self) -> None:
        settings = _settings(
            categories=[{"name": "Runtime"}],
            groups=[{"name": "Projects", "categories": ["Unknown"]}],
            members_category="Members",
        )
        validate_settings(settings)

    def test_checks_run_in_order(self) -> None:
        settings = _settings(
            categories=[{"name": ""}],
            colors=dict(VALID_COLORS, color1="red"),
            groups=[{"name": "", "categories": []}],
        )
        self.assert_invalid(settings, "category [0] is not valid", "name cannot be empty")


if __name__ == "__main__":
    unittest.main()
