"""Languages quicktype is asked to emit, and how editor documents map onto them."""

from pathlib import PurePath
from typing import Optional

SUPPORTED_LANGUAGES: frozenset[str] = frozenset({
    "c++",
    "cpp",
    "cplusplus",
    "cs",
    "csharp",
    "elm",
    "go",
    "golang",
    "java",
    "objc",
    "objective-c",
    "objectivec",
    "swift",
    "typescript",
    "ts",
    "tsx",
})

# Spelling -> canonical name. The generator is still passed the spelling it was given.
CANONICAL_LANGUAGES: dict[str, str] = {
    "c++": "cplusplus",
    "cpp": "cplusplus",
    "cplusplus": "cplusplus",
    "cs": "csharp",
    "csharp": "csharp",
    "elm": "elm",
    "go": "go",
    "golang": "go",
    "java": "java",
    "objc": "objective-c",
    "objective-c": "objective-c",
    "objectivec": "objective-c",
    "swift": "swift",
    "typescript": "typescript",
    "ts": "typescript",
    "tsx": "typescript",
}

EXTENSION_LANGUAGES: dict[str, str] = {
    ".cs": "csharp",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".go": "go",
    ".java": "java",
    ".swift": "swift",
    ".cpp": "c++",
    ".cc": "c++",
    ".cxx": "c++",
    ".hpp": "c++",
    ".hh": "c++",
    ".h": "c++",
    ".m": "objc",
    ".mm": "objc",
    ".elm": "elm",
}


class LanguageTable:
    """Case-insensitive lookups over the fixed language allow-list. No top-level functions."""

    @staticmethod
    def is_supported(language: Optional[str]) -> bool:
        if not language:
            return False
        return language.lower() in SUPPORTED_LANGUAGES

    @staticmethod
    def canonical(language: str) -> Optional[str]:
        """Return the canonical name for a supported spelling, else None."""
        return CANONICAL_LANGUAGES.get(language.lower())

    @staticmethod
    def for_path(path: str) -> Optional[str]:
        """Detect a document's language from its file extension."""
        suffix = PurePath(path).suffix.lower()
        return EXTENSION_LANGUAGES.get(suffix)

    @staticmethod
    def aliases() -> dict[str, list[str]]:
        """Group supported spellings by canonical name, sorted for display."""
        grouped: dict[str, list[str]] = {}
        for spelling in sorted(SUPPORTED_LANGUAGES):
            grouped.setdefault(CANONICAL_LANGUAGES[spelling], []).append(spelling)
        return dict(sorted(grouped.items()))
