"""Data models for installed components
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

COMPONENT_TYPE = "Component"


@dataclass
class Descriptor:
    """Parsed `publish.yaml` of an installed component"""

    type: str = ""  # only "Component" is recognised
    name: str = ""
    version: str = ""
    description: str = ""
    homepage: str = ""

    @property
    def is_component(self) -> bool:
        return self.type == COMPONENT_TYPE

    @classmethod
    def from_mapping(cls, data: Any) -> Optional["Descriptor"]:
        """Build a descriptor from loaded YAML, or None for any other shape."""
        if not isinstance(data, dict):
            return None

        return cls(
            type=_as_text(data.get("Type")),
            name=_as_text(data.get("Name")),
            version=_as_text(data.get("Version")),
            description=_as_text(data.get("Description")),
            homepage=_as_text(data.get("HomePage")),
        )


def _as_text(value: Any) -> str:
    # YAML turns `Version: 0.1` into a float
    if value is None:
        return ""
    return str(value)


@dataclass
class Registry:
    """A remote source components are downloaded from"""

    key: str  # "serverless" | "github"
    label: str
    url: str
    dirname: str  # subdirectory of <root>/components

    @property
    def title(self) -> str:
        return f"{self.label} [{self.url}]"


@dataclass
class ComponentEntry:
    """A valid component found on disk"""

    display_name: str
    descriptor: Descriptor
    path: Path
    size: int = 0  # bytes

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def version(self) -> str:
        return self.descriptor.version

    @property
    def description(self) -> str:
        return self.descriptor.description

    @property
    def homepage(self) -> str:
        return self.descriptor.homepage

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component": self.display_name,
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "homepage": self.homepage,
            "size": self.size,
            "path": str(self.path),
        }


@dataclass
class RegistryListing:
    """Result of scanning one registry root"""

    registry: Registry
    entries: List[ComponentEntry] = field(default_factory=list)
