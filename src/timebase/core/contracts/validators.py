"""
JSON Schema Contract Validators

Валидация JSON-представлений Rational и PacketTiming на границе с
коллабораторами (контейнеры, конфигурация потоков, внешние сервисы).
Использует библиотеку jsonschema (Draft 2020-12).

Тип "integer" в схемах строгий: 1.0 и true отклоняются, как и в
StrictInt-полях моделей, поэтому данные, прошедшие validate, всегда
строятся через parse.

Схемы (поставляются вместе с пакетом, contracts/schema/):
- rational.json
- packet_timing.json
"""

import json
import logging
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterator, Type

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match
from jsonschema.validators import extend
from pydantic import BaseModel

from timebase.core.domain.packet_timing import PacketTiming
from timebase.core.math.integer_safeguards import is_strict_int
from timebase.core.math.rational import Rational

logger = logging.getLogger(__name__)

_SCHEMA_DIR = Path(__file__).parent / "schema"


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return is_strict_int(instance)


# Draft 2020-12 с "integer" без float-значений (1.0)
StrictIntegerValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузка и кэширование JSON Schema из каталога (по умолчанию schema/ пакета)."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or _SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения ('rational', 'packet_timing').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        schema = self._schemas.get(schema_name)
        if schema is not None:
            return schema

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            StrictIntegerValidator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор контракта: JSON Schema + Pydantic модель, которую он строит.

    Подклассы задают schema_name и model.
    """

    schema_name: ClassVar[str]
    model: ClassVar[Type[BaseModel]]

    def __init__(self, loader: SchemaLoader = _SCHEMA_LOADER):
        self.validator = StrictIntegerValidator(loader.load_schema(self.schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            logger.warning("%s contract violation at %s: %s", self.schema_name, error.json_path, error.message)
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def parse(self, data: Dict[str, Any]) -> Any:
        """Валидация по схеме и построение модели."""
        self.validate(data)
        return self.model.model_validate(data)


class RationalValidator(ContractValidator):
    """{"num": int, "den": int != 0} → Rational (без редукции)."""

    schema_name = "rational"
    model = Rational


class PacketTimingValidator(ContractValidator):
    """{"pts", "dts", "duration", "time_base"} → PacketTiming."""

    schema_name = "packet_timing"
    model = PacketTiming


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rational(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data — не JSON-форма Rational."""
    RationalValidator().validate(data)


def validate_packet_timing(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если data — не JSON-форма PacketTiming."""
    PacketTimingValidator().validate(data)
