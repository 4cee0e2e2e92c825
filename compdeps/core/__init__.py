"""Core data model: files, components and their tables."""

from compdeps.core.model import (
    CODE_EXTENSIONS,
    COMPILATION_UNIT_EXTENSIONS,
    Component,
    ComponentTable,
    ComponentType,
    FileTable,
    RawInclude,
    SourceFile,
)

__all__ = [
    "CODE_EXTENSIONS",
    "COMPILATION_UNIT_EXTENSIONS",
    "Component",
    "ComponentTable",
    "ComponentType",
    "FileTable",
    "RawInclude",
    "SourceFile",
]
