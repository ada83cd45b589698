"""Shared scanning logic for registry roots"""

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from ..models import ComponentEntry, Registry
from .descriptor import read_descriptor
from .size import folder_size

logger = logging.getLogger(__name__)


class RegistryScanner:
    """Scan one registry root directory for installed components.

    Subclasses describe the directory layout of their registry by yielding
    `(prefix, directory)` candidates from `iter_candidates()`; the prefix is
    prepended to the component name for display.
    """

    registry: Registry

    def __init__(self, root: Path):
        self.root = Path(root)

    def exists(self) -> bool:
        return self.root.is_dir()

    def scan(self) -> Iterator[ComponentEntry]:
        """Lazily yield every valid component under the root, in name order."""
        if not self.exists():
            logger.debug("Registry root %s does not exist, skipping", self.root)
            return

        for prefix, candidate in self.iter_candidates():
            descriptor = read_descriptor(candidate)
            if descriptor is None:
                continue

            display_name = f"{prefix}/{descriptor.name}" if prefix else descriptor.name
            yield ComponentEntry(
                display_name=display_name,
                descriptor=descriptor,
                path=candidate,
                size=folder_size(candidate),
            )

    def iter_candidates(self) -> Iterator[Tuple[str, Path]]:
        raise NotImplementedError

    def _subdirs(self, directory: Path) -> List[Path]:
        return sorted(p for p in directory.iterdir() if p.is_dir())
