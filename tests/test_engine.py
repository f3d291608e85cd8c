import pytest
from runtime_template_switch import (
    EngineConfig,
    MissingStrategy,
    MissingVariableError,
    SecurityError,
    TemplateNotFoundError,
    TemplateRegistry,
    TemplateSyntaxError,
    UnknownHelperError,
)


@pytest.fixture
def registry():
    return TemplateRegistry(EngineConfig())


class TestExpressions:
    def test_path_lookup(self, registry):
        assert registry.render_template("Hello {{user.name}}", {"user": {"name": "Alice"}}) == "Hello Alice"

    def test_list_index(self, registry):
        assert registry.render_template("{{items[1]}}", {"items": ["apple", "banana"]}) == "banana"

    def test_this(self, registry):
        assert registry.render_template("{{this}}", "x") == "x"

    @pytest.mark.parametrize("source, expected", [
        ('{{"text"}}', "text"),
        ("{{'single'}}", "single"),
        ("{{42}}", "42"),
        ("{{true}}", "true"),
        ("{{null}}", ""),
    ])
    def test_literals(self, registry, source, expected):
        assert registry.render_template(source) == expected

    def test_html_is_escaped_by_default(self, registry):
        assert registry.render_template("{{html}}", {"html": "<b>"}) == "&lt;b&gt;"

    def test_triple_stache_is_raw(self, registry):
        assert registry.render_template("{{{html}}}", {"html": "<b>"}) == "<b>"

    def test_escaping_can_be_disabled(self):
        registry = TemplateRegistry(EngineConfig(escape_html=False))
        assert registry.render_template("{{html}}", {"html": "<b>"}) == "<b>"

    def test_comments_are_dropped(self, registry):
        assert registry.render_template("a{{! note }}b{{!-- long --}}c") == "abc"

    def test_long_comment_may_contain_closing_braces(self, registry):
        assert registry.render_template("a{{!-- x }} y --}}b") == "ab"

    def test_quoted_param_may_contain_closing_braces(self, registry):
        assert registry.render_template('{{"a}}b"}}') == "a}}b"

    def test_escaped_mustache_is_literal(self, registry):
        assert registry.render_template("\\{{name}}", {"name": "x"}) == "{{name}}"

    def test_private_segment_rejected(self, registry):
        with pytest.raises(SecurityError):
            registry.render_template("{{obj._secret}}", {"obj": {"_secret": 1}})


class TestMissingStrategy:
    def test_empty(self, registry):
        assert registry.render_template("[{{missing}}]", {}) == "[]"

    def test_keep(self):
        registry = TemplateRegistry(EngineConfig(missing_strategy=MissingStrategy.KEEP))
        assert registry.render_template("[{{missing}}]", {}) == "[{{missing}}]"

    def test_error(self):
        registry = TemplateRegistry(EngineConfig(missing_strategy=MissingStrategy.ERROR))
        with pytest.raises(MissingVariableError) as exc_info:
            registry.render_template("{{a.b}}", {"a": {}})
        assert exc_info.value.path == "a.b"

    def test_null_is_not_missing(self):
        registry = TemplateRegistry(EngineConfig(missing_strategy=MissingStrategy.ERROR))
        assert registry.render_template("[{{a}}]", {"a": None}) == "[]"


class TestParser:
    def test_unclosed_block(self, registry):
        with pytest.raises(TemplateSyntaxError, match="Unclosed block 'switch'") as exc_info:
            registry.render_template("{{#switch x}}")
        assert (exc_info.value.line, exc_info.value.column) == (1, 1)

    def test_position_is_reported(self, registry):
        with pytest.raises(TemplateSyntaxError) as exc_info:
            registry.register_template_string("broken", "line1\n  {{#x}}")
        assert (exc_info.value.line, exc_info.value.column) == (2, 3)
        assert exc_info.value.template_name == "broken"

    @pytest.mark.parametrize("source", [
        "{{/switch}}",
        "{{#a}}{{/b}}",
        "{{}}",
        "{{#9bad}}{{/9bad}}",
        '{{#case "abc}}{{/case}}',
    ])
    def test_malformed(self, registry, source):
        with pytest.raises(TemplateSyntaxError):
            registry.render_template(source)

    def test_unknown_helper_is_a_render_error(self, registry):
        registry.register_template_string("tpl", "{{#nope}}x{{/nope}}")
        with pytest.raises(UnknownHelperError):
            registry.render("tpl", {})


class TestHelpers:
    def test_inline_function_helper(self, registry):
        @registry.helper("shout")
        def shout(h, r, ctx, rc, out):
            out.write("".join(str(p.value).upper() for p in h.params))

        assert registry.render_template('{{shout name "!"}}', {"name": "hey"}) == "HEY!"
        assert registry.has_helper("shout")

    def test_block_function_helper(self, registry):
        @registry.helper("twice")
        def twice(h, r, ctx, rc, out):
            h.render_template(r, ctx, rc, out)
            h.render_template(r, ctx, rc, out)

        assert registry.render_template("{{#twice}}{{v}}{{/twice}}", {"v": "ab"}) == "abab"

    def test_bare_name_calls_helper_before_data(self, registry):
        @registry.helper("hi")
        def hi(h, r, ctx, rc, out):
            out.write("HI")

        assert registry.render_template("{{hi}}|{{hi.there}}", {"hi": {"there": "data"}}) == "HI|data"

    def test_params_carry_paths(self, registry):
        seen = []

        @registry.helper("record")
        def record(h, r, ctx, rc, out):
            seen.extend((p.path, p.value) for p in h.params)

        registry.render_template('{{record a 1}}', {"a": "x"})
        assert seen == [("a", "x"), (None, 1)]


class TestRegistry:
    def test_render_registered_template(self, registry):
        registry.register_template_string("greeting", "Hi {{name}}")
        assert registry.has_template("greeting")
        assert registry.render("greeting", {"name": "Bo"}) == "Hi Bo"

    def test_unknown_template(self, registry):
        with pytest.raises(TemplateNotFoundError):
            registry.render("missing", {})
