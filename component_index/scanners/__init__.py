"""Scanner modules for the supported registries"""

from .base import RegistryScanner
from .descriptor import DESCRIPTOR_FILENAME, read_descriptor
from .github import GithubRegistryScanner
from .serverless import ServerlessRegistryScanner
from .size import folder_size, format_size

__all__ = [
    "RegistryScanner",
    "ServerlessRegistryScanner",
    "GithubRegistryScanner",
    "DESCRIPTOR_FILENAME",
    "read_descriptor",
    "folder_size",
    "format_size",
]
