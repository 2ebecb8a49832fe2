import pytest

from sdkgen.codegen.core.config import ConfigError, EmitterConfig
from sdkgen.codegen.languages.typescript import TypeScriptEmitter
from sdkgen.codegen.registry import (
    EmitterRegistry,
    RegistryError,
    get_emitter,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


@pytest.fixture
def registry():
    registry = EmitterRegistry()
    registry.register("typescript", TypeScriptEmitter, aliases=["ts", "js"])
    return registry


def test_builtin_languages():
    assert list_supported_languages() == ["typescript"]
    for name in ("typescript", "TS", "javascript", "js"):
        assert is_language_supported(name)
    assert not is_language_supported("cobol")


def test_language_info():
    info = get_language_info("js")
    assert info["name"] == "typescript"
    assert info["file_extension"] == ".ts"
    assert sorted(info["aliases"]) == ["javascript", "js", "ts"]


def test_unknown_language_raises():
    with pytest.raises(RegistryError, match="cobol"):
        get_emitter("cobol")


def test_config_forms(registry, tmp_path):
    assert registry.create_emitter("ts").config.indent_size == 2
    assert registry.create_emitter("ts", {"indentSize": 4}).config.indent_size == 4
    emitter = registry.create_emitter("ts", EmitterConfig(indent_size=3))
    assert emitter.config.indent_size == 3

    path = tmp_path / "c.json"
    path.write_text('{"indentSize": 6}', encoding="utf-8")
    assert registry.create_emitter("ts", str(path)).config.indent_size == 6


def test_invalid_config_is_wrapped(registry):
    with pytest.raises(RegistryError) as exc_info:
        registry.create_emitter("ts", {"indent_size": -1})
    assert isinstance(exc_info.value.__cause__, ConfigError)


def test_alias_conflicts(registry):
    with pytest.raises(RegistryError, match="already points"):
        registry.register("other", TypeScriptEmitter, aliases=["ts"])
    with pytest.raises(RegistryError, match="primary language"):
        registry.register("other", TypeScriptEmitter, aliases=["typescript"])


def test_register_rejects_non_emitters(registry):
    with pytest.raises(RegistryError):
        registry.register("text", str)


def test_unregister_removes_aliases(registry):
    registry.unregister("typescript")
    assert not registry.is_supported("ts")
    assert registry.list_languages() == []
