from __future__ import annotations

import httpx
import pytest

from clientschema.definition_loader import load_definition, parse_definition
from clientschema.exceptions import DefinitionParseError
from clientschema.settings import Settings

_LEGACY_DEFINITION = """
id: demo
name: Demo Tracker
type: private
links:
  - https://demo.example/
legacylinks:
  - https://old-demo.example/
login:
  path: /login.php
  inputs:
    username: "{{ .Config.username }}"
    password: "{{ .Config.password }}"
search:
  path: /browse.php
  inputs:
    search: "{{ .Query.Keywords }}"
    incldead: 1
ratio:
  path: /my.php
"""


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {"definitions_dir": None, "http_proxy": None, "https_proxy": None}
    values.update(overrides)
    return Settings(**values)


def test_load_definition_parses_and_normalizes(write_definition) -> None:
    path = write_definition(_LEGACY_DEFINITION)

    definition = load_definition(path, settings=_settings())

    assert definition.id == "demo"
    assert definition.type == "private"
    assert definition.encoding == "UTF-8"
    assert definition.legacy_links == ["https://old-demo.example/"]
    assert [s.name for s in definition.settings or []] == ["username", "password"]
    assert definition.login is not None
    assert definition.login.method == "form"
    assert definition.search is not None
    assert [(block.path, block.inherit_inputs) for block in definition.search.paths or []] == [("/browse.php", True)]
    assert definition.search.inputs == {"search": "{{ .Query.Keywords }}", "incldead": 1}


def test_load_definition_resolves_relative_location(write_definition, tmp_path) -> None:
    write_definition("id: relative\n", name="relative.yml")

    definition = load_definition("relative.yml", settings=_settings(definitions_dir=tmp_path))

    assert definition.id == "relative"


def test_load_definition_missing_file_raises(tmp_path) -> None:
    with pytest.raises(DefinitionParseError, match="missing.yml"):
        load_definition(tmp_path / "missing.yml", settings=_settings())


def test_load_definition_reads_each_time(write_definition) -> None:
    path = write_definition("id: first\n")
    first = load_definition(path, settings=_settings())
    path.write_text("id: second\n", encoding="utf-8")

    second = load_definition(path, settings=_settings())

    assert (first.id, second.id) == ("first", "second")


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("id: [unclosed", "invalid YAML"),
        ("- just\n- a list\n", "must be a mapping"),
        ("", "must be a mapping"),
        ("settings: not-a-list\n", "invalid definition"),
    ],
)
def test_parse_definition_rejects_malformed_documents(text: str, reason: str) -> None:
    with pytest.raises(DefinitionParseError, match=reason):
        parse_definition(text, location="inline.yml")


def test_parse_definition_does_not_normalize() -> None:
    definition = parse_definition("id: raw\n")

    assert definition.settings is None
    assert definition.encoding is None


def test_load_definition_fetches_remote_location(monkeypatch) -> None:
    requested: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, text="id: remote\ntype: public\n")

    real_client = httpx.Client

    def _client(**kwargs: object) -> httpx.Client:
        return real_client(transport=httpx.MockTransport(_handler), **kwargs)

    monkeypatch.setattr(httpx, "Client", _client)

    definition = load_definition("https://defs.example/remote.yml", settings=_settings())

    assert requested == ["https://defs.example/remote.yml"]
    assert definition.id == "remote"
    assert definition.encoding == "UTF-8"


def test_load_definition_remote_error_raises(monkeypatch) -> None:
    real_client = httpx.Client

    def _client(**kwargs: object) -> httpx.Client:
        return real_client(transport=httpx.MockTransport(lambda request: httpx.Response(404)), **kwargs)

    monkeypatch.setattr(httpx, "Client", _client)

    with pytest.raises(DefinitionParseError, match="defs.example"):
        load_definition("https://defs.example/missing.yml", settings=_settings())
