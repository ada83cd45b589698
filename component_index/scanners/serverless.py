"""Serverless registry scanner - `components/devsapp.cn`"""

from pathlib import Path
from typing import Iterator, Tuple

from ..registries import SERVERLESS_REGISTRY
from .base import RegistryScanner

# Official components are installed one level deeper, under this directory
RESERVED_NAMESPACE = "devsapp"


class ServerlessRegistryScanner(RegistryScanner):
    """Scan the serverless registry root.

    Layout::

        devsapp.cn/
            <component>/publish.yaml
            devsapp/
                <component>/publish.yaml
    """

    registry = SERVERLESS_REGISTRY

    def iter_candidates(self) -> Iterator[Tuple[str, Path]]:
        for entry in self._subdirs(self.root):
            if entry.name == RESERVED_NAMESPACE:
                for child in self._subdirs(entry):
                    yield RESERVED_NAMESPACE, child
            else:
                yield "", entry
