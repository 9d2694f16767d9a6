"""Device and dtype configuration for simulator tensors."""

from __future__ import annotations

import torch


class Device:
    """
    A logical simulator device: an underlying PyTorch device plus the real
    and complex dtypes used for state vectors and operators.

    Instances are treated as immutable after construction.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        dtype: torch.dtype = torch.float64,
        complex_dtype: torch.dtype = torch.complex128,
    ) -> None:
        self.name = name
        self.torch_device = torch_device
        self.dtype = dtype
        self.complex_dtype = complex_dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"complex_dtype={self.complex_dtype})"
        )

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str) -> Device:
    """
    Create a Device from its name.

    Supported names:
        - "sv_cpu": CPU statevector device
        - "sv_cuda": CUDA statevector device (only if CUDA is available)

    Both default to double precision (complex128).

    Raises:
        RuntimeError: If "sv_cuda" is requested but CUDA is not available.
        ValueError: If the device name is not supported.
    """
    if name == "sv_cpu":
        return Device(name="sv_cpu", torch_device=torch.device("cpu"))
    if name == "sv_cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device(name="sv_cuda", torch_device=torch.device("cuda"))
    supported = ["sv_cpu", "sv_cuda"]
    raise ValueError(
        f"Unsupported device name: {name!r}. Supported devices: {supported}"
    )


def default_device() -> Device:
    """Return the default CPU statevector device."""
    return device("sv_cpu")


def resolve_device(spec: Device | torch.device | str | None) -> Device:
    """
    Normalize a device specification into a :class:`Device`.

    Accepts a Device, a device name, a ``torch.device`` (cpu or cuda) or None
    for the default device.
    """
    if spec is None:
        return default_device()
    if isinstance(spec, Device):
        return spec
    if isinstance(spec, str):
        return device(spec)
    if isinstance(spec, torch.device):
        if spec.type == "cpu":
            return device("sv_cpu")
        if spec.type == "cuda":
            return device("sv_cuda")
        raise ValueError(
            f"Unsupported torch.device type: {spec.type}. "
            "Only 'cpu' and 'cuda' are supported."
        )
    raise TypeError(
        f"device must be Device, str, torch.device, or None, got {type(spec)}"
    )


__all__ = ["Device", "device", "default_device", "resolve_device"]
