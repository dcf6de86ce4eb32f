"""Domain entities for handler applications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Mapping, Optional, Tuple, TypedDict, Union

from ttn_handler.domain.entities.errors import ApplicationValidationError


class PayloadFormat(str, Enum):
    CUSTOM = "custom"
    CAYENNE = "cayenne"


class Application(TypedDict, total=False):
    """Plain form of an application as returned by the handler."""

    app_id: str
    payload_format: str
    decoder: str
    converter: str
    validator: str
    encoder: str
    register_on_join_access_key: str


class PayloadFunctions(TypedDict, total=False):
    """Source text of the custom payload functions, ``None`` when unset."""

    decoder: Optional[str]
    converter: Optional[str]
    validator: Optional[str]
    encoder: Optional[str]


class ApplicationField(str, Enum):
    """Application fields that can be changed through an update."""

    PAYLOAD_FORMAT = "payload_format"
    REGISTER_ON_JOIN_ACCESS_KEY = "register_on_join_access_key"
    DECODER = "decoder"
    CONVERTER = "converter"
    VALIDATOR = "validator"
    ENCODER = "encoder"


PAYLOAD_FUNCTION_FIELDS: Tuple[ApplicationField, ...] = (
    ApplicationField.DECODER,
    ApplicationField.CONVERTER,
    ApplicationField.VALIDATOR,
    ApplicationField.ENCODER,
)


@dataclass(frozen=True, slots=True)
class FieldUpdate:
    """Set ``field`` to ``value``. An empty string is a value like any other."""

    field: ApplicationField
    value: str


@dataclass(frozen=True, slots=True)
class ApplicationUpdate:
    """
    Ordered set of field updates sent in one ``SetApplication`` call.

    A field ends up in the request if and only if the update carries a
    ``FieldUpdate`` for it. Nothing is inferred from the values.
    """

    updates: Tuple[FieldUpdate, ...] = ()

    def __post_init__(self) -> None:
        seen = set()
        for update in self.updates:
            if update.field in seen:
                raise ApplicationValidationError(
                    f"Field '{update.field.value}' updated more than once",
                    details={"field": update.field.value},
                )
            seen.add(update.field)

    @classmethod
    def of(cls, *updates: FieldUpdate) -> "ApplicationUpdate":
        return cls(updates=tuple(updates))

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, Union[str, PayloadFormat, None]],
        allowed: Iterable[ApplicationField] = tuple(ApplicationField),
    ) -> "ApplicationUpdate":
        """
        Build an update from the keys present in ``values``.

        Args:
            values: Field name to new value. Every key becomes an update,
                falsy values included. ``None`` sends the empty string, which
                is how the handler stores an unset field.
            allowed: Fields accepted in ``values``.

        Raises:
            ApplicationValidationError: On keys outside ``allowed`` or
                non-string values.
        """
        allowed_names = {field.value for field in allowed}
        unknown = sorted(set(values) - allowed_names)
        if unknown:
            raise ApplicationValidationError(
                f"Unknown application fields: {', '.join(unknown)}",
                details={"fields": unknown, "allowed": sorted(allowed_names)},
            )

        updates = []
        for name, value in values.items():
            if value is None:
                value = ""
            elif isinstance(value, Enum):
                value = value.value
            if not isinstance(value, str):
                raise ApplicationValidationError(
                    f"Field '{name}' expects a string, got {type(value).__name__}",
                    details={"field": name},
                )
            updates.append(FieldUpdate(field=ApplicationField(name), value=value))
        return cls(updates=tuple(updates))

    @property
    def fields(self) -> Tuple[ApplicationField, ...]:
        return tuple(update.field for update in self.updates)

    def __iter__(self) -> Iterator[FieldUpdate]:
        return iter(self.updates)

    def __len__(self) -> int:
        return len(self.updates)
