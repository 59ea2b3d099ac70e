"""String-key enums and component resolution from key values.

A string-key enum is a set of string values that all belong to one
component. Registering one lets callers translate a bare value
(``engine.translate_string_key("user.welcome")``) without naming the
component.

Resolution has two paths:

1. Primary: an index built from registered enums (value -> component id).
2. Fallback: a scan over every registered component's first-language keys,
   memoized in a cache that is dropped whenever a component is registered
   or updated.

Accepted enum shapes:
- ``StringKeyEnum`` (see ``create_string_keys``), equal by component id.
- A ``str``-valued ``Enum`` class defining ``__component_id__``.
- Any mapping or Enum whose values share a ``"<componentId>.<key>"`` prefix
  (structural detection).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional

from component_i18n.core.logging import get_module_logger
from component_i18n.i18n.errors import (
    InvalidStringKeyEnumError,
    StringKeyNotRegisteredError,
)
from component_i18n.i18n.models import ComponentConfig
from component_i18n.operations import OperationResult

logger = get_module_logger()

COMPONENT_ID_ATTRIBUTE = "__component_id__"


@dataclass(frozen=True, eq=False)
class StringKeyEnum:
    """An explicit, tagged set of string keys owned by one component.

    Equality and hashing use ``component_id`` only, so two structurally
    identical copies created by separately imported modules are the same
    enum for the registry.

    Example:
        >>> UserKeys = create_string_keys("user", {"Welcome": "user.welcome"})
        >>> UserKeys.Welcome
        'user.welcome'
        >>> "user.welcome" in UserKeys
        True
    """

    component_id: str
    members: Mapping[str, str] = field(default_factory=dict)

    @property
    def values(self) -> frozenset:
        return frozenset(self.members.values())

    def __getattr__(self, name: str) -> str:
        if name.startswith("_"):
            raise AttributeError(name)
        members = self.__dict__.get("members", {})
        if name in members:
            return members[name]
        raise AttributeError(
            f"'{self.__dict__.get('component_id')}' string keys have no member '{name}'"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringKeyEnum):
            return NotImplemented
        return self.component_id == other.component_id

    def __hash__(self) -> int:
        return hash(("StringKeyEnum", self.component_id))

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.members.values())

    def __len__(self) -> int:
        return len(self.members)


def create_string_keys(component_id: str, members: Mapping[str, str]) -> StringKeyEnum:
    """Build a StringKeyEnum.

    Raises:
        InvalidStringKeyEnumError: If the id is empty or a member value is
            not a string.
    """
    if not component_id:
        raise InvalidStringKeyEnumError("String key enums need a component id")
    for name, value in members.items():
        if not isinstance(value, str):
            raise InvalidStringKeyEnumError(
                f"String key member '{name}' must be a string, got {type(value).__name__}"
            )
    return StringKeyEnum(component_id=component_id, members=dict(members))


def enum_values(enum_obj: Any) -> Optional[List[str]]:
    """String values of an enum-like object, or None if it is not one."""
    if isinstance(enum_obj, StringKeyEnum):
        return list(enum_obj.members.values())
    if isinstance(enum_obj, type) and issubclass(enum_obj, Enum):
        return [member.value for member in enum_obj if isinstance(member.value, str)]
    if isinstance(enum_obj, Mapping):
        return [value for value in enum_obj.values() if isinstance(value, str)]
    return None


def enum_members(enum_obj: Any) -> Dict[str, str]:
    """Member name -> value for an enum-like object."""
    if isinstance(enum_obj, StringKeyEnum):
        return dict(enum_obj.members)
    if isinstance(enum_obj, type) and issubclass(enum_obj, Enum):
        return {
            member.name: member.value
            for member in enum_obj
            if isinstance(member.value, str)
        }
    if isinstance(enum_obj, Mapping):
        return {
            str(name): value
            for name, value in enum_obj.items()
            if isinstance(value, str)
        }
    return {}


def extract_component_id(enum_obj: Any) -> Optional[str]:
    """Read the component id from identity metadata, else from structure."""
    if isinstance(enum_obj, StringKeyEnum):
        return enum_obj.component_id

    tagged = getattr(enum_obj, COMPONENT_ID_ATTRIBUTE, None)
    if isinstance(tagged, str) and tagged:
        return tagged

    return _component_id_from_values(enum_values(enum_obj) or [])


def _component_id_from_values(values: List[str]) -> Optional[str]:
    prefixes = set()
    for value in values:
        prefix, dot, rest = value.partition(".")
        if not dot or not prefix or not rest:
            return None
        prefixes.add(prefix)
    if len(prefixes) == 1:
        return prefixes.pop()
    return None


def _identity_key(enum_obj: Any) -> Any:
    try:
        hash(enum_obj)
    except TypeError:
        return ("object", id(enum_obj))
    return enum_obj


@dataclass(frozen=True)
class StringKeyEnumEntry:
    enum_obj: Any
    component_id: str


class StringKeyResolver:
    """Maps string-key values to their owning component id.

    Args:
        component_source: Callable returning the currently registered
            components; consulted by the scan fallback.
    """

    def __init__(self, component_source: Callable[[], Iterable[ComponentConfig]]):
        self._component_source = component_source
        self._registered: Dict[Any, str] = {}
        self._enums: Dict[str, Any] = {}
        self._value_index: Dict[str, str] = {}
        self._scan_cache: Optional[Dict[str, str]] = None

    def register(self, enum_obj: Any, component_id_override: Optional[str] = None) -> str:
        """Register a string-key enum and return its component id.

        Idempotent: registering the same enum again (or another enum with
        an already-registered component id) returns the existing id without
        adding an entry.

        Raises:
            InvalidStringKeyEnumError: If no component id can be determined,
                the object holds no string values, or a value is already
                owned by a different component.
        """
        identity = _identity_key(enum_obj)
        existing = self._registered.get(identity)
        if existing is not None:
            return existing

        values = enum_values(enum_obj)
        if values is None:
            raise InvalidStringKeyEnumError(
                f"Cannot register {type(enum_obj).__name__} as a string key enum"
            )

        component_id = component_id_override or extract_component_id(enum_obj)
        if not component_id:
            raise InvalidStringKeyEnumError(
                "String key enum has no component id metadata and no override"
            )

        if component_id in self._enums:
            logger.debug("string_key_enum_already_registered", component_id=component_id)
            return component_id

        for value in values:
            owner = self._value_index.get(value)
            if owner is not None and owner != component_id:
                raise InvalidStringKeyEnumError(
                    f"String key '{value}' already belongs to component '{owner}'"
                )

        self._registered[identity] = component_id
        self._enums[component_id] = enum_obj
        for value in values:
            self._value_index[value] = component_id

        logger.info(
            "string_key_enum_registered",
            component_id=component_id,
            value_count=len(values),
        )
        return component_id

    def has(self, enum_obj: Any) -> bool:
        if _identity_key(enum_obj) in self._registered:
            return True
        return isinstance(enum_obj, StringKeyEnum) and (
            self._enums.get(enum_obj.component_id) == enum_obj
        )

    def get_all(self) -> List[StringKeyEnumEntry]:
        return [
            StringKeyEnumEntry(enum_obj=enum_obj, component_id=component_id)
            for component_id, enum_obj in self._enums.items()
        ]

    def resolve(self, value: str) -> OperationResult:
        """Resolve ``value`` to a component id without raising.

        Returns:
            Success with the component id as data, or a NOT_FOUND result
            carrying StringKeyNotRegisteredError.
        """
        component_id = self._value_index.get(value)
        if component_id is not None:
            return OperationResult.success(component_id)

        component_id = self._scan_index().get(value)
        if component_id is not None:
            logger.debug(
                "string_key_scan_fallback_used", value=value, component_id=component_id
            )
            return OperationResult.success(component_id, message="scan_fallback")

        return OperationResult.failure(StringKeyNotRegisteredError(value))

    def resolve_component_id(self, value: str) -> str:
        """Raises:
        StringKeyNotRegisteredError: If neither path knows the value.
        """
        return self.resolve(value).unwrap()

    def invalidate_scan_cache(self) -> None:
        self._scan_cache = None

    def clear(self) -> None:
        self._registered.clear()
        self._enums.clear()
        self._value_index.clear()
        self._scan_cache = None

    def _scan_index(self) -> Dict[str, str]:
        if self._scan_cache is None:
            index: Dict[str, str] = {}
            for component in self._component_source():
                if not component.strings:
                    continue
                first_language = next(iter(component.strings))
                for key in component.strings[first_language]:
                    index.setdefault(key, component.id)
            self._scan_cache = index
            logger.debug("string_key_scan_cache_built", key_count=len(index))
        return self._scan_cache
