import re
from pathlib import PurePath

DEFAULT_TOP_LEVEL_NAME = "TopLevel"

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")


class TopLevelNaming:
    """Derive the generated root type name from the target document."""

    @staticmethod
    def from_document(path: str) -> str:
        """Base name without extension, unsanitized (same as the editor command)."""
        stem = PurePath(path).stem
        return stem or DEFAULT_TOP_LEVEL_NAME

    @staticmethod
    def sanitize(name: str) -> str:
        """
        Turn an arbitrary file stem into a PascalCase identifier.

        ASCII letters and digits only, always starting with a letter, so the
        result is a legal type name in every supported target language.
        "user-profile.v2" becomes "UserProfileV2".
        """
        words = [w for w in _WORD_SPLIT.split(name) if w]
        if not words:
            return DEFAULT_TOP_LEVEL_NAME
        result = "".join(w[0].upper() + w[1:] for w in words)
        if result[0].isdigit():
            result = "Type" + result
        return result
