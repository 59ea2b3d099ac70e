"""Language registry.

An ordinary object rather than process-wide state: each engine owns one
unless a registry is passed in, which lets engines share languages
deliberately.
"""

from typing import Dict, List, Optional

from component_i18n.core.logging import get_module_logger
from component_i18n.i18n.errors import (
    DuplicateLanguageError,
    InvalidConfigError,
    LanguageNotFoundError,
)
from component_i18n.i18n.models import LanguageDefinition

logger = get_module_logger()


class LanguageRegistry:
    """Stores LanguageDefinitions by id, in registration order."""

    def __init__(self, languages: Optional[List[LanguageDefinition]] = None):
        self._languages: Dict[str, LanguageDefinition] = {}
        self._default_id: Optional[str] = None
        for language in languages or []:
            self.register(language)

    def register(self, language: LanguageDefinition) -> None:
        """Register a language.

        The first language registered, or any flagged ``is_default``,
        becomes the default.

        Raises:
            DuplicateLanguageError: If the id or the code is already taken.
        """
        if language.id in self._languages or self.get_by_code(language.code):
            raise DuplicateLanguageError(language.id)

        self._languages[language.id] = language
        if language.is_default or self._default_id is None:
            self._default_id = language.id
        logger.debug("language_registered", language_id=language.id, code=language.code)

    def register_if_not_exists(self, language: LanguageDefinition) -> bool:
        """Register unless the id exists. Returns True if it was added."""
        if self.has(language.id):
            return False
        self.register(language)
        return True

    def has(self, language_id: str) -> bool:
        return language_id in self._languages

    def get(self, language_id: str) -> LanguageDefinition:
        try:
            return self._languages[language_id]
        except KeyError:
            raise LanguageNotFoundError(language_id) from None

    def get_all(self) -> List[LanguageDefinition]:
        return list(self._languages.values())

    def get_ids(self) -> List[str]:
        return list(self._languages.keys())

    def get_codes(self) -> List[str]:
        return [language.code for language in self._languages.values()]

    def get_by_code(self, code: str) -> Optional[LanguageDefinition]:
        for language in self._languages.values():
            if language.code == code:
                return language
        return None

    def get_default(self) -> Optional[LanguageDefinition]:
        if self._default_id is None:
            return None
        return self._languages[self._default_id]

    def set_default(self, language_id: str) -> None:
        if not self.has(language_id):
            raise LanguageNotFoundError(language_id)
        self._default_id = language_id

    def get_matching_code(
        self,
        requested_code: Optional[str] = None,
        user_default_code: Optional[str] = None,
    ) -> str:
        """Pick the first registered code among requested, user default and
        registry default.

        Raises:
            InvalidConfigError: If nothing matches and no default exists.
        """
        for candidate in (requested_code, user_default_code):
            trimmed = candidate.strip() if candidate else None
            if trimmed and self.get_by_code(trimmed):
                return trimmed

        default = self.get_default()
        if default is None:
            raise InvalidConfigError("No default language configured")
        return default.code

    def clear(self) -> None:
        self._languages.clear()
        self._default_id = None

    def __len__(self) -> int:
        return len(self._languages)
