"""
Unit tests for structured record decoding (typeparse.converters.records).

Tests pydantic models, dataclasses, TypedDicts and dicts in both JSON
and YAML record formats.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel
from typing_extensions import TypedDict

from typeparse import (
    RecordDecodeError,
    UnsupportedTypeError,
    must_parse,
    try_parse,
    with_record_format,
)
from typeparse.config import new_config
from typeparse.converters import RecordConverter
from typeparse.resolve import resolve


class Endpoint(BaseModel):
    host: str
    port: int = 80


@dataclass
class Limits:
    cpu: float = 1.0
    tags: list[str] = field(default_factory=list)


class Point(TypedDict):
    x: int
    y: int


class Opaque:
    """A plain class pydantic has no schema for."""


@dataclass
class HoldsOpaque:
    payload: Opaque


# ---------------------------------------------------------------------------
# JSON (default)
# ---------------------------------------------------------------------------

class TestJsonRecords:
    """Records decoded from JSON text."""

    def test_pydantic_model(self):
        value = must_parse(Endpoint, '{"host": "db", "port": 5432}')
        assert value == Endpoint(host="db", port=5432)

    def test_model_defaults_apply(self):
        assert must_parse(Endpoint, '{"host": "db"}').port == 80

    def test_dataclass(self):
        value = must_parse(Limits, '{"cpu": 2.5, "tags": ["a", "b"]}')
        assert value == Limits(cpu=2.5, tags=["a", "b"])

    def test_typeddict(self):
        assert must_parse(Point, '{"x": 1, "y": 2}') == {"x": 1, "y": 2}

    def test_dict(self):
        assert must_parse(dict[str, int], '{"a": 1, "b": 2}') == {"a": 1, "b": 2}

    def test_bare_dict(self):
        assert must_parse(dict, '{"a": [1, 2]}') == {"a": [1, 2]}

    def test_invalid_json(self):
        with pytest.raises(RecordDecodeError, match="json"):
            must_parse(Endpoint, "{host: db}")

    def test_schema_mismatch(self):
        with pytest.raises(RecordDecodeError):
            must_parse(Endpoint, '{"port": 1}')

    def test_empty_input_is_an_error(self):
        """Records have no empty-input shortcut."""
        value, err = try_parse(Endpoint, "")
        assert value is None
        assert isinstance(err, RecordDecodeError)
        assert isinstance(err, ValueError)

    def test_zero_value_uses_default_constructor(self):
        value, err = try_parse(Limits, "not json")
        assert value == Limits()
        assert err is not None

    def test_dict_zero_value(self):
        value, err = try_parse(dict[str, int], "[")
        assert value == {}
        assert err is not None

    def test_always_set(self):
        outcome = resolve(dict[str, int]).convert("{}", new_config())
        assert outcome.value == {}
        assert outcome.is_set is True

    def test_optional_record(self):
        assert must_parse(Endpoint | None, '{"host": "h"}') == Endpoint(host="h")


# ---------------------------------------------------------------------------
# YAML
# ---------------------------------------------------------------------------

class TestYamlRecords:
    """Records decoded from YAML text via with_record_format('yaml')."""

    def test_flow_mapping(self):
        value = must_parse(Endpoint, "{host: db, port: 5432}", with_record_format("yaml"))
        assert value == Endpoint(host="db", port=5432)

    def test_block_mapping(self):
        text = "cpu: 0.5\ntags:\n  - x\n"
        value = must_parse(Limits, text, with_record_format("yaml"))
        assert value == Limits(cpu=0.5, tags=["x"])

    def test_json_is_valid_yaml(self):
        value = must_parse(Point, '{"x": 3, "y": 4}', with_record_format("yaml"))
        assert value == {"x": 3, "y": 4}

    def test_malformed_yaml(self):
        with pytest.raises(RecordDecodeError, match="yaml"):
            must_parse(Endpoint, "host: [unclosed", with_record_format("yaml"))

    def test_empty_input_is_an_error(self):
        with pytest.raises(RecordDecodeError):
            must_parse(Endpoint, "", with_record_format("yaml"))


# ---------------------------------------------------------------------------
# Records pydantic cannot describe
# ---------------------------------------------------------------------------

class TestRecordsWithoutSchema:
    """A record whose fields pydantic cannot handle is unsupported, lazily."""

    def test_resolves_without_error(self):
        assert isinstance(resolve(HoldsOpaque), RecordConverter)

    def test_try_parse_returns_unsupported(self):
        value, err = try_parse(HoldsOpaque, "{}")
        assert value is None
        assert isinstance(err, UnsupportedTypeError)
        assert "HoldsOpaque" in str(err)

    def test_must_parse_raises_unsupported(self):
        with pytest.raises(UnsupportedTypeError):
            must_parse(HoldsOpaque, '{"payload": 1}')

    def test_empty_sequence_never_builds_schema(self):
        assert try_parse(list[HoldsOpaque], "") == ([], None)
