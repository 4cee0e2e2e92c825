"""Configuration schema definitions using Pydantic for validation.

The analyzer needs very little configuration: which paths to skip, which
top-level directories hold distributed packages, and which include texts
refer to third-party code that is not part of the tree. Using Pydantic
ensures configuration errors are caught early with clear error messages.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from compdeps.utils.path_utils import first_segment

DEFAULT_PREDEFINED_COMPONENTS: Dict[str, str] = {
    "sdl2/sdl.h": "SDL2",
    "sdl2/sdl_opengl.h": "GL",
    "gl/glew.h": "GLEW",
}


class AnalyzerConfig(BaseModel):
    """Top-level configuration for a project scan.

    Attributes:
        blacklist: Entries to skip during the tree walk. An entry matches
            when the repository-relative path starts with it, or when it
            equals the file/directory name.
        package_roots: Top-level directory names whose components are always
            libraries (vendored or distributed packages).
        predefined_components: Include key (lowercase) to external component
            name, for third-party headers that are not part of the tree.
        known_headers: Extra include texts that are expected not to resolve.
        known_header_prefixes: Include text prefixes treated as known
            external headers (e.g. ``boost/``).
    """

    blacklist: List[str] = Field(default_factory=list)
    package_roots: List[str] = Field(default_factory=lambda: ["packages"])
    predefined_components: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_PREDEFINED_COMPONENTS)
    )
    known_headers: List[str] = Field(default_factory=list)
    known_header_prefixes: List[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("blacklist")
    @classmethod
    def validate_blacklist(cls, v: List[str]) -> List[str]:
        """Normalize separators and drop empty entries."""
        cleaned = []
        for entry in v:
            entry = entry.replace("\\", "/").strip()
            if entry.startswith("./"):
                entry = entry[2:]
            if not entry:
                raise ValueError("blacklist entries must be non-empty")
            cleaned.append(entry)
        return cleaned

    @field_validator("predefined_components")
    @classmethod
    def validate_predefined(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Include keys are matched case-insensitively."""
        normalized: Dict[str, str] = {}
        for key, name in v.items():
            if not key or not name:
                raise ValueError(
                    f"Invalid predefined component mapping: {key!r} -> {name!r}"
                )
            normalized[key.lower()] = name
        return normalized

    def is_package_root(self, root: str) -> bool:
        """Return True when ``root`` lives under a package directory."""
        return first_segment(root.replace("\\", "/")) in self.package_roots

    @classmethod
    def default(cls) -> "AnalyzerConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
