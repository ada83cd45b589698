"""Known component registries and how to pick one"""

from typing import Dict, Optional

from .models import Registry

SERVERLESS_REGISTRY = Registry(
    key="serverless",
    label="serverless registry",
    url="http://registry.devsapp.cn/simple",
    dirname="devsapp.cn",
)

GITHUB_REGISTRY = Registry(
    key="github",
    label="github registry",
    url="https://api.github.com/repos",
    dirname="github.com",
)

# Listing order
REGISTRIES = (SERVERLESS_REGISTRY, GITHUB_REGISTRY)

DEFAULT_REGISTRY = SERVERLESS_REGISTRY

_BY_ALIAS: Dict[str, Registry] = {}
for _registry in REGISTRIES:
    _BY_ALIAS[_registry.key] = _registry
    _BY_ALIAS[_registry.url] = _registry


def resolve_registry(value: Optional[str]) -> Optional[Registry]:
    """Map a registry URL or short name to a Registry.

    An empty value means the default registry; an unknown value returns None.
    """
    if value is None or not str(value).strip():
        return DEFAULT_REGISTRY
    value = str(value).strip()
    return _BY_ALIAS.get(value) or _BY_ALIAS.get(value.rstrip("/"))
