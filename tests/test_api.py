"""Tests for the high-level Corchetes API."""

import pytest

IMG = (
    '<img src="http://x/y.png" '
    'style="max-width: 100%; max-height: 400px; border-radius: 5px; margin: 10px 0;" '
    "alt=\"Image\" onerror=\"this.style.display='none'\">"
)


class TestTranslateFunction:
    """Tests for the translate() function."""

    def test_empty_input(self) -> None:
        from corchetes import translate

        assert translate("") == ""

    def test_plain_text_escaped_only(self) -> None:
        from corchetes import translate

        assert translate("a < b & 'c' \"d\" > e") == "a &lt; b &amp; &#039;c&#039; &quot;d&quot; &gt; e"

    def test_script_is_escaped(self) -> None:
        from corchetes import translate

        out = translate("<script>alert(1)</script>")
        assert "<script>" not in out
        assert out == "&lt;script&gt;alert(1)&lt;/script&gt;"

    def test_script_inside_tag_is_escaped(self) -> None:
        from corchetes import translate

        assert translate("[b]<script>[/b]") == "<strong>&lt;script&gt;</strong>"

    def test_unmatched_tag(self) -> None:
        from corchetes import translate

        out = translate("[b]hello")
        assert "[b]hello" in out
        assert "<strong>" not in out

    def test_basic_nesting(self) -> None:
        from corchetes import translate

        assert translate("[b][i]x[/i][/b]") == "<strong><em>x</em></strong>"

    def test_color(self) -> None:
        from corchetes import translate

        assert translate("[color=red]x[/color]") == '<span style="color: red">x</span>'

    def test_size(self) -> None:
        from corchetes import translate

        assert "font-size: 14px" in translate("[size=10]x[/size]")

    def test_size_non_numeric(self) -> None:
        from corchetes import translate

        assert translate("[size=big]x[/size]") == '<span style="font-size: NaNpx">x</span>'

    def test_list(self) -> None:
        from corchetes import translate

        out = translate("[list][*]a\n[*]b[/list]")
        assert out.count("<li>") == 2
        assert out.index("<li>a</li>") < out.index("<li>b</li>")
        assert out == '<ul style="margin: 10px 0; padding-left: 20px;"><li>a</li>\n<li>b</li></ul>'

    @pytest.mark.parametrize("source", ["[img=http://x/y.png][/img]", "[img]http://x/y.png[/img]"])
    def test_image_forms(self, source: str) -> None:
        from corchetes import translate

        assert translate(source) == IMG

    def test_url(self) -> None:
        from corchetes import translate

        out = translate("[url=https://example.com/?a=1&b=2]site[/url]")
        assert out.startswith('<a href="https://example.com/?a=1&amp;b=2" target="_blank"')
        assert out.endswith(">site</a>")

    def test_unknown_tag(self) -> None:
        from corchetes import translate

        assert translate("[foo]bar[/foo]") == "[foo]bar[/foo]"

    def test_unknown_tag_normalized(self) -> None:
        from corchetes import translate

        assert translate("[FOO=1]bar[/foo]") == "[foo]bar[/foo]"

    def test_tags_inside_list(self) -> None:
        from corchetes import translate

        out = translate("[list][*][b]a[/b][*]b[/list]")
        assert "<li><strong>a</strong></li>" in out
        assert "<li>b</li>" in out

    def test_alignment(self) -> None:
        from corchetes import translate

        assert translate("[RIGHT]x[/right]") == '<div style="text-align: right">x</div>'


class TestTranslatorClass:
    """Tests for the Translator class."""

    def test_basic_usage(self) -> None:
        from corchetes import Translator

        bb = Translator()
        assert bb("[u]x[/u]") == "<u>x</u>"

    def test_default_config(self) -> None:
        from corchetes import Translator
        from corchetes.config import DEFAULT_MAX_DEPTH

        assert Translator().config.max_depth == DEFAULT_MAX_DEPTH

    def test_max_depth_overrides_config(self) -> None:
        from corchetes import TranslateConfig, Translator

        bb = Translator(max_depth=3, config=TranslateConfig(max_depth=10))
        assert bb.config.max_depth == 3

    def test_config_argument(self) -> None:
        from corchetes import TranslateConfig, Translator

        bb = Translator(config=TranslateConfig(max_depth=1))
        assert bb("[b][i]x[/i][/b]") == "<strong>[i]x</strong>"

    def test_translate_many(self) -> None:
        from corchetes import Translator

        bb = Translator()
        assert bb.translate_many(["[b]a[/b]", "", "[i]b[/i]"]) == [
            "<strong>a</strong>",
            "",
            "<em>b</em>",
        ]

    def test_translate_many_accepts_generator(self) -> None:
        from corchetes import Translator

        bb = Translator()
        assert bb.translate_many(f"[b]{n}[/b]" for n in range(3)) == [
            "<strong>0</strong>",
            "<strong>1</strong>",
            "<strong>2</strong>",
        ]

    def test_does_not_leak_config(self) -> None:
        from corchetes import Translator, get_translate_config
        from corchetes.config import DEFAULT_MAX_DEPTH

        Translator(max_depth=2)("[b]x[/b]")
        assert get_translate_config().max_depth == DEFAULT_MAX_DEPTH


class TestPublicExports:
    def test_all_names_importable(self) -> None:
        import corchetes

        for name in corchetes.__all__:
            assert hasattr(corchetes, name), name

    def test_version(self) -> None:
        import corchetes

        assert corchetes.__version__ == "0.1.0"
