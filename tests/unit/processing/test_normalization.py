from __future__ import annotations

from clientschema.processing.normalization import normalize_definition
from clientschema.typing.models import IndexerDefinition, LoginBlock, SearchBlock, SearchPathBlock, SettingsField


def test_missing_settings_are_synthesized() -> None:
    definition = normalize_definition(IndexerDefinition(id="demo"))

    assert definition.settings is not None
    assert [(s.name, s.label, s.type) for s in definition.settings] == [
        ("username", "Username", "text"),
        ("password", "Password", "password"),
    ]


def test_declared_settings_are_kept() -> None:
    settings = [SettingsField(name="cookie", label="Cookie", type="text")]

    definition = normalize_definition(IndexerDefinition(settings=settings))

    assert [s.name for s in definition.settings or []] == ["cookie"]


def test_encoding_defaults_to_utf8() -> None:
    assert normalize_definition(IndexerDefinition()).encoding == "UTF-8"
    assert normalize_definition(IndexerDefinition(encoding="windows-1252")).encoding == "windows-1252"


def test_login_method_defaults_to_form_only_when_login_present() -> None:
    with_login = normalize_definition(IndexerDefinition(login=LoginBlock(path="/login.php")))
    with_post = normalize_definition(IndexerDefinition(login=LoginBlock(method="post")))
    without_login = normalize_definition(IndexerDefinition())

    assert with_login.login is not None
    assert with_login.login.method == "form"
    assert with_post.login is not None
    assert with_post.login.method == "post"
    assert without_login.login is None


def test_search_paths_list_is_ensured() -> None:
    definition = normalize_definition(IndexerDefinition())

    assert definition.search is not None
    assert definition.search.paths == []


def test_legacy_search_path_becomes_inheriting_path_block() -> None:
    definition = normalize_definition(IndexerDefinition(search=SearchBlock(path="/search")))

    assert definition.search is not None
    paths = definition.search.paths or []
    assert [(block.path, block.inherit_inputs) for block in paths] == [("/search", True)]
    assert definition.search.path == "/search"


def test_legacy_search_path_is_appended_after_existing_paths() -> None:
    search = SearchBlock(path="/legacy", paths=[SearchPathBlock(path="/modern")])

    definition = normalize_definition(IndexerDefinition(search=search))

    assert definition.search is not None
    assert [(block.path, block.inherit_inputs) for block in definition.search.paths or []] == [
        ("/modern", False),
        ("/legacy", True),
    ]


def test_normalization_is_idempotent() -> None:
    definition = IndexerDefinition(search=SearchBlock(path="/search"), login=LoginBlock())

    once = normalize_definition(definition).model_dump()
    twice = normalize_definition(definition).model_dump()

    assert once == twice
    assert definition.search is not None
    assert len(definition.search.paths or []) == 1


def test_normalization_happens_in_place() -> None:
    definition = IndexerDefinition()

    assert normalize_definition(definition) is definition
