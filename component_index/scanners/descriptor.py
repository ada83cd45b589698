"""Descriptor reader - loads `publish.yaml` from a component directory."""

import logging
from pathlib import Path
from typing import Optional

import yaml

from ..models import Descriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "publish.yaml"


def read_descriptor(component_dir: Path) -> Optional[Descriptor]:
    """Return the component descriptor, or None if the directory is not a component.

    A missing, unreadable or malformed `publish.yaml` is treated the same as a
    descriptor whose `Type` is not `Component`.
    """
    descriptor_file = Path(component_dir) / DESCRIPTOR_FILENAME

    try:
        with open(descriptor_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.debug("Unreadable descriptor %s: %s", descriptor_file, e)
        return None

    descriptor = Descriptor.from_mapping(data)
    if descriptor is None or not descriptor.is_component:
        logger.debug("Not a component: %s", component_dir)
        return None

    return descriptor
