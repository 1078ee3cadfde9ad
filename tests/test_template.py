"""Tests for format-string compilation and token substitution."""

from assdialog.template import (
    DEFAULT_FORMAT,
    TOKENS,
    compile_template,
    render,
    render_single_pass,
    substitute,
    template_tokens,
)


class TestCompileTemplate:
    def test_default_format(self):
        assert compile_template(DEFAULT_FORMAT) == "!start-!end\t!actor\t!text\n"

    def test_plain_text_unchanged(self):
        assert compile_template("!text only") == "!text only"

    def test_escaped_backslash_still_expands_following_n(self):
        """Backslashes are not escapable: a\\\\n still contains backslash+n."""
        assert compile_template("a\\\\n") == "a\\\n"

    def test_no_rescan_after_tab_pass(self):
        """'\\' + '\\t' + 'n' leaves backslash, tab, n; the tab pass creates no new escape."""
        assert compile_template("\\\\tn") == "\\\tn"

    def test_every_occurrence(self):
        assert compile_template("\\t\\t\\n\\n") == "\t\t\n\n"


class TestSubstitute:
    def test_all_occurrences(self):
        assert substitute("!a and !a", "!a", "x") == "x and x"

    def test_non_overlapping_left_to_right(self):
        assert substitute("aaa", "aa", "b") == "ba"

    def test_absent_token_is_noop(self):
        assert substitute("hello", "!text", "x") == "hello"

    def test_case_sensitive(self):
        assert substitute("!TEXT !text", "!text", "x") == "!TEXT x"

    def test_template_argument_not_modified(self):
        template = "!text"
        substitute(template, "!text", "x")
        assert template == "!text"


class TestRender:
    def test_empty_mapping_returns_template(self):
        assert render("!start-!end", {}) == "!start-!end"

    def test_full_mapping(self):
        mapping = {
            "!layer": "0",
            "!start": "0:00:01.00",
            "!end": "0:00:02.00",
            "!style": "Default",
            "!actor": "Bob",
            "!effect": "",
            "!text": "Hi",
        }
        assert render("[!layer] !start-!end !style/!actor!effect: !text", mapping) == (
            "[0] 0:00:01.00-0:00:02.00 Default/Bob: Hi"
        )

    def test_later_token_inside_value_is_substituted_again(self):
        """An actor named '!text' is replaced by the text in the later !text pass."""
        mapping = {"!actor": "!text", "!text": "hi"}
        assert render("!actor said !text", mapping) == "hi said hi"

    def test_earlier_token_inside_value_is_kept(self):
        mapping = {"!start": "S", "!text": "!start"}
        assert render("!text", mapping) == "!start"

    def test_order_is_fixed_not_mapping_order(self):
        mapping = {"!text": "T", "!layer": "!text"}
        assert render("!layer", mapping) == "T"

    def test_unknown_tokens_applied_last(self):
        mapping = {"!x": "!text", "!text": "t"}
        assert render("!x !text", mapping) == "!text t"


class TestRenderSinglePass:
    def test_values_not_rescanned(self):
        mapping = {"!actor": "!text", "!text": "hi"}
        assert render_single_pass("!actor said !text", mapping) == "!text said hi"

    def test_matches_render_without_hazard(self):
        mapping = {"!start": "0:00:01.00", "!end": "0:00:02.00", "!text": "plain"}
        template = "!start-!end !text !text"
        assert render_single_pass(template, mapping) == render(template, mapping)

    def test_empty_mapping(self):
        assert render_single_pass("!text", {}) == "!text"


class TestTemplateTokens:
    def test_lists_tokens_in_canonical_order(self):
        assert template_tokens("!text by !actor at !start") == ["!start", "!actor", "!text"]

    def test_token_set(self):
        assert TOKENS == ("!layer", "!start", "!end", "!style", "!actor", "!effect", "!text")
