"""Per-component constants with ownership tracking.

Each component contributes a flat mapping of template constants. Every
constant key has exactly one owner: the first registrant, or the last
component to ``update``/``replace`` it. The merged view resolves each key
to its owner's value, while non-owners only fill gaps, so libraries can
register overlapping defaults in any order and an application can override
them at runtime.

Usage:
    registry = ConstantsRegistry()
    registry.register("lib", {"site": "Example", "support": "help@example.com"})
    registry.update("app", {"site": "My Site"})
    registry.get_merged()["site"]  # "My Site"
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from component_i18n.core.logging import get_module_logger
from component_i18n.i18n.errors import (
    ConstantConflictError,
    ConstantsSchemaValidationError,
    FieldError,
)
from component_i18n.i18n.safety import validate_object_keys

logger = get_module_logger()

ConstantsSchema = Type[BaseModel]


@dataclass(frozen=True)
class ConstantsEntry:
    """One component's contribution to the constants pool."""

    component_id: str
    constants: Mapping[str, Any]
    schema: Optional[ConstantsSchema] = None


class ConstantsRegistry:
    """Registry of per-component constants with conflict detection and a
    cached, owner-resolved merged view."""

    def __init__(self):
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._owners: Dict[str, str] = {}
        self._schemas: Dict[str, ConstantsSchema] = {}
        self._deferred_schemas: Dict[str, ConstantsSchema] = {}
        self._merged_cache: Optional[Dict[str, Any]] = None

    def register(
        self,
        component_id: str,
        constants: Mapping[str, Any],
        schema: Optional[ConstantsSchema] = None,
    ) -> None:
        """Register constants for a component.

        A no-op if the component already has an entry. Nothing is stored
        unless schema validation and conflict detection both pass.

        Args:
            component_id: Registering component.
            constants: Flat key -> primitive mapping.
            schema: Optional pydantic model to validate against; falls back
                to a schema deferred via ``register_schema``.

        Raises:
            UnsafeInputError: If a key is dangerous.
            ConstantsSchemaValidationError: If validation fails.
            ConstantConflictError: If a key owned by another component holds
                a different value.
        """
        if component_id in self._entries:
            logger.debug("constants_already_registered", component_id=component_id)
            return

        validate_object_keys(constants)

        effective_schema = schema or self._deferred_schemas.get(component_id)
        if effective_schema is not None:
            self._validate_against_schema(component_id, constants, effective_schema)

        self._detect_conflicts(component_id, constants)

        if effective_schema is not None:
            self._deferred_schemas.pop(component_id, None)
            self._schemas[component_id] = effective_schema

        self._entries[component_id] = dict(constants)
        for key in constants:
            self._owners.setdefault(key, component_id)

        self._invalidate()
        logger.info(
            "constants_registered",
            component_id=component_id,
            key_count=len(constants),
        )

    def register_schema(self, component_id: str, schema: ConstantsSchema) -> None:
        """Store a schema applied when the component first registers
        constants."""
        self._deferred_schemas[component_id] = schema

    def has(self, component_id: str) -> bool:
        return component_id in self._entries

    def update(self, component_id: str, constants: Mapping[str, Any]) -> None:
        """Merge constants into a component's entry, creating it if needed.

        Never idempotent. The updater takes ownership of every key it
        supplies, including keys owned by other components.

        Raises:
            UnsafeInputError: If a key is dangerous.
            ConstantsSchemaValidationError: If the merged set fails the
                component's schema.
        """
        validate_object_keys(constants)

        existing = self._entries.get(component_id, {})
        merged = {**existing, **constants}

        stored_schema = self._schema_for(component_id)
        if stored_schema is not None:
            self._validate_against_schema(component_id, merged, stored_schema)

        self._entries[component_id] = merged
        for key in constants:
            previous = self._owners.get(key)
            if previous is not None and previous != component_id:
                logger.info(
                    "constant_ownership_transferred",
                    key=key,
                    previous_owner=previous,
                    new_owner=component_id,
                )
            self._owners[key] = component_id

        self._invalidate()

    def replace(self, component_id: str, constants: Mapping[str, Any]) -> None:
        """Swap a component's constants wholesale.

        Ownership of keys the component owned but no longer supplies is
        released; the new keys are claimed.
        """
        validate_object_keys(constants)

        stored_schema = self._schema_for(component_id)
        if stored_schema is not None:
            self._validate_against_schema(component_id, constants, stored_schema)

        for key in self._entries.get(component_id, {}):
            if self._owners.get(key) == component_id:
                del self._owners[key]

        self._entries[component_id] = dict(constants)
        for key in constants:
            self._owners[key] = component_id

        self._reassign_orphans()
        self._invalidate()

    def get(self, component_id: str) -> Optional[Mapping[str, Any]]:
        entry = self._entries.get(component_id)
        return dict(entry) if entry is not None else None

    def get_all(self) -> List[ConstantsEntry]:
        return [
            ConstantsEntry(
                component_id=component_id,
                constants=dict(constants),
                schema=self._schemas.get(component_id),
            )
            for component_id, constants in self._entries.items()
        ]

    def get_merged(self) -> Mapping[str, Any]:
        """Owner-resolved flat view of every registered constant.

        The result is cached until the next register/update/replace. Treat
        it as read-only.
        """
        if self._merged_cache is not None:
            return self._merged_cache

        merged: Dict[str, Any] = {}
        for component_id, constants in self._entries.items():
            for key, value in constants.items():
                if self._owners.get(key) == component_id or key not in merged:
                    merged[key] = value

        self._merged_cache = merged
        return merged

    def resolve_owner(self, key: str) -> Optional[str]:
        return self._owners.get(key)

    def clear(self) -> None:
        self._entries.clear()
        self._owners.clear()
        self._schemas.clear()
        self._deferred_schemas.clear()
        self._invalidate()

    def _schema_for(self, component_id: str) -> Optional[ConstantsSchema]:
        return self._schemas.get(component_id) or self._deferred_schemas.get(
            component_id
        )

    def _reassign_orphans(self) -> None:
        # A released key still supplied elsewhere goes to its first supplier.
        for component_id, constants in self._entries.items():
            for key in constants:
                self._owners.setdefault(key, component_id)

    def _invalidate(self) -> None:
        self._merged_cache = None

    def _detect_conflicts(self, component_id: str, constants: Mapping[str, Any]) -> None:
        for key, value in constants.items():
            owner = self._owners.get(key)
            if owner is None or owner == component_id:
                continue
            existing = self._entries.get(owner, {}).get(key)
            if existing != value:
                logger.warning(
                    "constant_conflict_detected",
                    key=key,
                    new_owner=component_id,
                    existing_owner=owner,
                )
                raise ConstantConflictError(key, component_id, owner)

    def _validate_against_schema(
        self,
        component_id: str,
        constants: Mapping[str, Any],
        schema: ConstantsSchema,
    ) -> None:
        try:
            schema.model_validate(dict(constants))
        except ValidationError as e:
            field_errors = [
                FieldError(
                    field=".".join(str(part) for part in error.get("loc", ())) or "__root__",
                    message=error.get("msg", ""),
                    type=error.get("type", "value_error"),
                )
                for error in e.errors()
            ]
            logger.warning(
                "constants_schema_validation_failed",
                component_id=component_id,
                interface_id=schema.__name__,
                error_count=len(field_errors),
            )
            raise ConstantsSchemaValidationError(
                component_id, schema.__name__, field_errors, str(e)
            ) from e
