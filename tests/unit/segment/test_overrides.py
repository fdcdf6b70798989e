"""Tests for zsh_prompts.segment._overrides module."""

from dataclasses import fields

from pytest_mock import MockerFixture

from zsh_prompts.enums import ColorRole
from zsh_prompts.segment import ColorOverrides, NamedColor, RgbColor


class TestFromStrings:
    def test_parses_valid_specs(self) -> None:
        overrides = ColorOverrides.from_strings({"default": "white", "staged": "#00ff00"})
        assert overrides.default is NamedColor.WHITE
        assert overrides.staged == RgbColor(0, 255, 0)
        assert overrides.branch is None

    def test_invalid_spec_is_treated_as_absent(self) -> None:
        overrides = ColorOverrides.from_strings({"branch": "not-a-color"})
        assert overrides.branch is None
        assert overrides == ColorOverrides()

    def test_none_values_are_skipped(self) -> None:
        overrides = ColorOverrides.from_strings({"branch": None, "clean": "green"})
        assert overrides.branch is None
        assert overrides.clean is NamedColor.GREEN

    def test_unknown_keys_are_ignored(self) -> None:
        overrides = ColorOverrides.from_strings({"sparkles": "red"})
        assert overrides == ColorOverrides()

    def test_invalid_spec_is_logged(self, mocker: MockerFixture) -> None:
        logger = mocker.MagicMock()
        _ = ColorOverrides.from_strings({"ahead": "#12"}, logger=logger)
        logger.debug.assert_called_once_with(
            "Ignoring invalid color override", role="ahead", spec="#12"
        )


class TestForRole:
    def test_every_role_maps_to_a_field(self) -> None:
        names = {f.name for f in fields(ColorOverrides)}
        for role in ColorRole:
            assert role.value in names

    def test_returns_role_specific_value_only(self) -> None:
        overrides = ColorOverrides(default=NamedColor.RED, behind=NamedColor.BLUE)
        assert overrides.for_role(ColorRole.BEHIND) is NamedColor.BLUE
        assert overrides.for_role(ColorRole.AHEAD) is None


class TestMergedOver:
    def test_set_fields_win(self) -> None:
        base = ColorOverrides(staged=NamedColor.RED, clean=NamedColor.GREEN)
        top = ColorOverrides(staged=NamedColor.BLUE)
        merged = top.merged_over(base)
        assert merged.staged is NamedColor.BLUE
        assert merged.clean is NamedColor.GREEN

    def test_inputs_are_unchanged(self) -> None:
        base = ColorOverrides(staged=NamedColor.RED)
        top = ColorOverrides(default=NamedColor.WHITE)
        _ = top.merged_over(base)
        assert base == ColorOverrides(staged=NamedColor.RED)
        assert top == ColorOverrides(default=NamedColor.WHITE)

    def test_empty_over_base_is_base(self) -> None:
        base = ColorOverrides(branch=NamedColor.CYAN)
        assert ColorOverrides().merged_over(base) == base
