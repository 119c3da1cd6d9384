"""Error-path and malformed input tests.

Malformed markup degrades to literal text and never raises. Exceptions are
reserved for API misuse such as invalid configuration.
"""

import pytest

from corchetes import Translator, translate
from corchetes.errors import ConfigError, CorchetesError


class TestErrorHierarchy:
    def test_config_error_is_corchetes_error(self) -> None:
        err = ConfigError("max_depth", "must be >= 1")
        assert isinstance(err, CorchetesError)
        assert err.field_name == "max_depth"

    def test_config_error_message(self) -> None:
        err = ConfigError("max_depth", "must be >= 1, got 0")
        assert str(err) == "Config field 'max_depth': must be >= 1, got 0"

    @pytest.mark.parametrize("depth", [0, 5000])
    def test_translator_rejects_bad_depth(self, depth: int) -> None:
        with pytest.raises(ConfigError):
            Translator(max_depth=depth)


class TestMalformedInputNeverRaises:
    @pytest.mark.parametrize(
        "source",
        [
            "[",
            "]",
            "[[",
            "]]",
            "[/]",
            "[=]",
            "[=][/]",
            "[b",
            "[/b",
            "[b]]",
            "[[b]]",
            "[b][/i][/b]",
            "[size=][/size]",
            "[size==]x[/size]",
            "[img][/img]",
            "[url][/url]",
            "[list][/list]",
            "[list][*][*][*][/list]",
            "[color][/color]",
            "\x00[b]\x00[/b]",
            "[b]" + "[i]" * 50,
        ],
    )
    def test_no_exception(self, source: str) -> None:
        assert isinstance(translate(source), str)

    def test_empty_image(self) -> None:
        assert 'src=""' in translate("[img][/img]")

    def test_empty_size_parameter(self) -> None:
        assert translate("[size=][/size]") == '<span style="font-size: NaNpx"></span>'

    def test_nested_bracket_tag_is_literal(self) -> None:
        assert translate("[[b]]") == "[[b]]"
