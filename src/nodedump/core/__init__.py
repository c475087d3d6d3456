"""Descriptor models and run configuration."""

from .config import DumpConfig
from .models import (
    Bucket,
    ContainerShape,
    NodeDescriptor,
    NodeKind,
    PinDescriptor,
    PinDirection,
    descriptor_to_dict,
    descriptors_to_records,
    pin_to_dict,
)

__all__ = [
    "DumpConfig",
    "Bucket",
    "ContainerShape",
    "NodeDescriptor",
    "NodeKind",
    "PinDescriptor",
    "PinDirection",
    "descriptor_to_dict",
    "descriptors_to_records",
    "pin_to_dict",
]
