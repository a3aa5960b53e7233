"""
Tests unitaires pour NamingOptions.
"""

import pytest

from src.core.exceptions import NamingConfigurationError
from src.core.value_objects.naming_options import ExtraRuleType, NamingOptions
from src.core.value_objects.parsed_info import ExtraType


class TestNamingOptionsBuild:
    """Tests de construction des conventions de nommage."""

    def test_default_extensions(self, naming_options: NamingOptions) -> None:
        assert naming_options.is_video_extension(".mkv") is True
        assert naming_options.is_video_extension(".MKV") is True
        assert naming_options.is_video_extension(".nfo") is False
        assert naming_options.is_stub_extension(".disc") is True

    def test_extra_extensions_are_added(self) -> None:
        """Les extensions supplementaires completent celles par defaut."""
        options = NamingOptions.build(extra_video_extensions=["m2ts", ".MTS", " "])

        assert options.is_video_extension(".m2ts") is True
        assert options.is_video_extension(".mts") is True
        assert options.is_video_extension(".mkv") is True

    def test_extra_clean_pattern_is_appended(self, naming_options: NamingOptions) -> None:
        options = NamingOptions.build(extra_clean_string_patterns=[r"^(?P<cleaned>.+?)\.custom$"])

        assert len(options.clean_string_patterns) == len(naming_options.clean_string_patterns) + 1
        assert options.clean_string_patterns[-1].pattern == r"^(?P<cleaned>.+?)\.custom$"

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(NamingConfigurationError) as exc_info:
            NamingOptions.build(extra_clean_string_patterns=["(unclosed"])

        assert exc_info.value.setting == "clean_string_patterns"
        assert exc_info.value.pattern == "(unclosed"

    def test_pattern_without_cleaned_group_raises(self) -> None:
        with pytest.raises(NamingConfigurationError, match="cleaned"):
            NamingOptions.build(extra_clean_string_patterns=[r"^(.+)$"])

    def test_extra_rules_are_typed(self, naming_options: NamingOptions) -> None:
        rule = naming_options.extra_rules[0]

        assert isinstance(rule.rule_type, ExtraRuleType)
        assert isinstance(rule.extra_type, ExtraType)


class TestStackingRules:
    """Tests du decoupage des noms par les regles d'empilement."""

    @pytest.mark.parametrize(
        ("name", "stack_name", "part_type", "part_number"),
        [
            ("Film cd1.avi", "Film", "cd", "1"),
            ("Film.part2.mkv", "Film", "part", "2"),
            ("Film - Disc 3", "Film", "Disc", "3"),
            ("Film (2010) [pt1].mkv", "Film (2010)", "pt", "1"),
        ],
    )
    def test_numerical_rule(
        self,
        naming_options: NamingOptions,
        name: str,
        stack_name: str,
        part_type: str,
        part_number: str,
    ) -> None:
        part = naming_options.stacking_rules[0].match(name)

        assert part is not None
        assert part.stack_name == stack_name
        assert part.part_type == part_type
        assert part.part_number == part_number

    def test_letter_rule(self, naming_options: NamingOptions) -> None:
        numerical, letters = naming_options.stacking_rules

        assert numerical.match("Film disc b.mkv") is None
        part = letters.match("Film disc b.mkv")
        assert part is not None
        assert (part.stack_name, part.part_number) == ("Film", "b")
        assert letters.is_numerical is False

    def test_no_part_marker(self, naming_options: NamingOptions) -> None:
        assert all(rule.match("Film.mkv") is None for rule in naming_options.stacking_rules)
