"""GitHub registry scanner - `components/github.com`"""

from pathlib import Path
from typing import Iterator, Tuple

from ..registries import GITHUB_REGISTRY
from .base import RegistryScanner


class GithubRegistryScanner(RegistryScanner):
    """Scan the github registry root, laid out as `<owner>/<component>/publish.yaml`."""

    registry = GITHUB_REGISTRY

    def iter_candidates(self) -> Iterator[Tuple[str, Path]]:
        for owner in self._subdirs(self.root):
            for child in self._subdirs(owner):
                yield owner.name, child
