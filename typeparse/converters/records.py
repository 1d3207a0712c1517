"""
Structured record converter for typeparse.

Records are targets whose text is an encoded document rather than a
single literal: pydantic models, dataclasses, ``TypedDict`` classes and
``dict[K, V]``. The text is decoded according to
``ParseConfig.record_format``:

- ``"json"``: ``TypeAdapter.validate_json`` (strict JSON, the default).
- ``"yaml"``: ``yaml.safe_load`` followed by ``TypeAdapter.validate_python``.

Unlike the leaves, a record has no empty-input shortcut: ``""`` is not a
valid document, so it fails with ``RecordDecodeError``. A successful
decode is always reported as set. The pydantic schema is built on the first
conversion, so a record type pydantic cannot handle is reported as
``UnsupportedTypeError`` only when a value reaches it.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from typeparse.config import ParseConfig
from typeparse.converters.base import Converter, Outcome, default_instance
from typeparse.exceptions import (
    RecordDecodeError,
    UnsupportedTypeError,
    describe_type,
)

logger = logging.getLogger(__name__)


class RecordConverter(Converter):
    """Decodes a structured document into a record type via pydantic."""

    def __init__(self, target: Any) -> None:
        super().__init__(target)
        self._adapter: TypeAdapter[Any] | None = None

    @property
    def adapter(self) -> TypeAdapter[Any]:
        """pydantic adapter for the target, built on first use.

        Raises:
            UnsupportedTypeError: If pydantic cannot build a schema for the
                target (e.g. a field of an arbitrary class).
        """
        if self._adapter is None:
            try:
                self._adapter = TypeAdapter(self.target)
            except PydanticSchemaGenerationError as e:
                raise UnsupportedTypeError(self.target, str(e)) from e
        return self._adapter

    def zero(self) -> Any:
        if isinstance(self.target, type):
            return default_instance(self.target)
        # dict[K, V] and other parameterized mappings
        return {}

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        adapter = self.adapter
        try:
            if config.record_format == "yaml":
                value = adapter.validate_python(yaml.safe_load(text))
            else:
                value = adapter.validate_json(text)
        except ValidationError as e:
            logger.debug("Record decode failed for %s: %s", self.target, e)
            raise RecordDecodeError(
                f"cannot decode {describe_type(self.target)} from "
                f"{config.record_format}: {e}"
            ) from e
        except yaml.YAMLError as e:
            raise RecordDecodeError(
                f"cannot decode {describe_type(self.target)} from yaml: {e}"
            ) from e
        return Outcome(value, True)
