"""Tests for command and Lua template rendering."""

from __future__ import annotations

import pytest

from sql_redis.errors import InitializationFailure, TemplateRenderFailure
from sql_redis.templates import TemplateRenderer
from sql_redis.templates.renderer import load_command_templates


@pytest.fixture(scope="module")
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_packaged_templates(renderer):
    names = renderer.template_names()
    assert names == sorted(names)
    assert {"string_get", "hash_set", "zset_get_reversed", "list_delete_value"} <= set(names)


def test_render(renderer):
    assert renderer.render("zset_get_reversed", {"key": "b", "max": "+inf", "min": "-inf"}) == (
        "ZREVRANGEBYSCORE b +inf -inf"
    )


def test_values_are_not_escaped(renderer):
    assert renderer.render("string_set", {"key": "k", "value": "<a & b>"}) == "SET k <a & b>"


def test_missing_template(renderer):
    with pytest.raises(TemplateRenderFailure) as exc:
        renderer.render("no_such_template", {})
    assert exc.value.template == "no_such_template"
    assert str(exc.value).startswith("Template error: ")


def test_undefined_variable(renderer):
    with pytest.raises(TemplateRenderFailure):
        renderer.render("hash_get", {"key": "k"})


def test_custom_directory(tmp_path):
    (tmp_path / "commands.yaml").write_text('string_get: "GET {{ key }} # custom"\n')
    custom = TemplateRenderer(tmp_path)
    assert custom.template_names() == ["string_get"]
    assert custom.render("string_get", {"key": "a"}) == "GET a # custom"
    assert custom.lua_template_names() == []
    with pytest.raises(TemplateRenderFailure):
        custom.render_lua("string", "get", {})


def test_missing_commands_file(tmp_path):
    with pytest.raises(InitializationFailure):
        TemplateRenderer(tmp_path)


@pytest.mark.parametrize(
    "content",
    [
        "string_get: [unclosed\n",
        "- GET {{ key }}\n",
        "string_get:\n  nested: GET\n",
    ],
)
def test_invalid_commands_file(tmp_path, content):
    path = tmp_path / "commands.yaml"
    path.write_text(content)
    with pytest.raises(InitializationFailure):
        load_command_templates(path)


def test_empty_commands_file(tmp_path):
    path = tmp_path / "commands.yaml"
    path.write_text("")
    assert load_command_templates(path) == {}


class TestLua:
    def test_names(self, renderer):
        names = renderer.lua_template_names()
        assert "zset_zrangebyscore_lua" in names
        assert "hash_hmget_lua" in names
        assert "string_mget_lua" in names

    def test_nested_names(self, renderer):
        names = renderer.lua_template_names()
        assert "complex_join_inner_join_lua" in names
        assert "complex_join_left_join_lua" in names
        assert "complex_aggregation_group_by_lua" in names
        assert "complex_aggregation_window_functions_lua" in names
        assert "utils_aggregation_lua" in names
        assert "utils_type_conversion_lua" in names
        assert len(names) == len(set(names))

    def test_nested_script(self, renderer):
        script = renderer.render_lua("complex", "join/inner_join", {})
        assert "redis.call('KEYS', KEYS[1])" in script
        assert "ARGV[1] or 'hash'" in script
        assert "cjson.encode(rows)" in script

    def test_nested_script_context(self, renderer):
        script = renderer.render_lua("complex", "aggregation/window_functions", {"window_function": "rank"})
        assert "ARGV[4] or 'rank'" in script

    def test_utility_script_is_plain_lua(self, renderer):
        script = renderer.render_lua("utils", "data_processing", {})
        assert "list_to_indexed_table = list_to_indexed_table," in script

    def test_defaults(self, renderer):
        script = renderer.render_lua("zset", "zrangebyscore", {})
        assert "'-inf'" in script and "'+inf'" in script

    def test_context_overrides_defaults(self, renderer):
        script = renderer.render_lua("list", "lrange", {"start": "2", "stop": "5"})
        assert "or 2" in script and "or 5" in script

    def test_optional_variable(self, renderer):
        assert "(name email)" in renderer.render_lua("hash", "hmget", {"fields": "name email"})
        assert "ARGV: fields\n" in renderer.render_lua("hash", "hmget", {})

    def test_unknown_script(self, renderer):
        with pytest.raises(TemplateRenderFailure):
            renderer.render_lua("stream", "xadd", {})
