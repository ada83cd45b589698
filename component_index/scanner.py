"""Main scanner orchestrator - coordinates the registry scanners"""

import logging
from pathlib import Path, PurePath
from typing import List, Optional

from .config import default_root_home
from .errors import ComponentNotFoundError
from .models import ComponentEntry, Registry, RegistryListing
from .scanners import (
    GithubRegistryScanner,
    RegistryScanner,
    ServerlessRegistryScanner,
    folder_size,
    read_descriptor,
)

logger = logging.getLogger(__name__)


class ComponentScanner:
    """Scans `<root_home>/components` for installed components"""

    def __init__(self, root_home: Optional[Path] = None):
        self.root_home = Path(root_home) if root_home else default_root_home()
        self.components_dir = self.root_home / "components"

        self.serverless_scanner = ServerlessRegistryScanner(
            self.components_dir / ServerlessRegistryScanner.registry.dirname
        )
        self.github_scanner = GithubRegistryScanner(
            self.components_dir / GithubRegistryScanner.registry.dirname
        )

    @property
    def scanners(self) -> List[RegistryScanner]:
        return [self.serverless_scanner, self.github_scanner]

    def scanner_for(self, registry: Registry) -> RegistryScanner:
        for scanner in self.scanners:
            if scanner.registry.key == registry.key:
                return scanner
        raise ValueError(f"No scanner for registry {registry.key}")

    def scan_all(self) -> List[RegistryListing]:
        """
        Scan every registry whose root directory exists.

        Registries without a root directory are left out; a root that exists
        but holds no valid components yields an empty listing.
        """
        listings = []
        for scanner in self.scanners:
            if not scanner.exists():
                continue
            listings.append(
                RegistryListing(
                    registry=scanner.registry,
                    entries=list(scanner.scan()),
                )
            )
        return listings

    def lookup(self, name: str, registry: Registry) -> Optional[ComponentEntry]:
        """
        Find one installed component by directory name.

        Args:
            name: Directory name relative to the registry root,
                  e.g. `devsapp/fc` or `owner/repo`.
            registry: The registry to look in.

        Returns:
            The entry, or None when the directory exists but is not a component.

        Raises:
            ComponentNotFoundError: The directory does not exist.
        """
        root = self.scanner_for(registry).root
        parts = PurePath(name).parts
        if PurePath(name).is_absolute():
            # Keep absolute names under the registry root
            parts = parts[1:]
        component_dir = root.joinpath(*parts)

        if not component_dir.exists():
            raise ComponentNotFoundError(name)

        descriptor = read_descriptor(component_dir)
        if descriptor is None:
            logger.debug("%s exists but has no valid descriptor", component_dir)
            return None

        return ComponentEntry(
            display_name=name,
            descriptor=descriptor,
            path=component_dir,
            size=folder_size(component_dir),
        )
