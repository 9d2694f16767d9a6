"""Core value types and device configuration."""

from .complex import DISPLAY_ZERO_TOL, Complex
from .device import Device, default_device, device, resolve_device

__all__ = [
    "Complex",
    "DISPLAY_ZERO_TOL",
    "Device",
    "device",
    "default_device",
    "resolve_device",
]
