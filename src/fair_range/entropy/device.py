"""Random bit source backed by an entropy device file.

Reads raw bytes from a character device such as ``/dev/urandom`` (the
default) or ``/dev/hwrng``. Any ``OSError`` or short read is surfaced as
:class:`~fair_range.exceptions.EntropyUnavailableError` so that a
``FallbackEntropySource`` can take over.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import IO, TYPE_CHECKING, Any

from fair_range.entropy.base import EntropySource
from fair_range.entropy.registry import register_entropy_source
from fair_range.exceptions import EntropyUnavailableError

if TYPE_CHECKING:
    from fair_range.config import FairRangeConfig

logger = logging.getLogger("fair_range")

_DEFAULT_DEVICE = "/dev/urandom"


@register_entropy_source("device")
class DeviceEntropySource(EntropySource):
    """Reads entropy from a device file, opened lazily on first use.

    Reads are serialised with a lock; the handle stays open until
    :meth:`close`, after which the next read reopens it.

    Args:
        path: Path of the entropy device.
    """

    def __init__(self, path: str = _DEFAULT_DEVICE) -> None:
        self._path = path
        self._handle: IO[bytes] | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: FairRangeConfig) -> DeviceEntropySource:
        """Build a source reading ``config.device_path``."""
        return cls(path=config.device_path)

    @property
    def name(self) -> str:
        """Return ``'device'``."""
        return "device"

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_available(self) -> bool:
        """Whether the device exists and is readable."""
        return os.access(self._path, os.R_OK)

    def get_random_bytes(self, n: int) -> bytes:
        """Read exactly *n* bytes from the device.

        Raises:
            EntropyUnavailableError: If the device cannot be opened or read,
                or returns fewer than *n* bytes.
        """
        if n == 0:
            return b""
        with self._lock:
            try:
                if self._handle is None:
                    self._handle = open(self._path, "rb", buffering=0)  # noqa: SIM115
                    logger.debug("Opened entropy device %s", self._path)
                data = self._handle.read(n)
            except OSError as exc:
                raise EntropyUnavailableError(
                    f"Cannot read entropy device {self._path}: {exc}"
                ) from exc
        if data is None or len(data) != n:
            got = 0 if data is None else len(data)
            raise EntropyUnavailableError(
                f"Short read from entropy device {self._path}: wanted {n} bytes, got {got}"
            )
        return data

    def close(self) -> None:
        """Close the device handle if open."""
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

    def health_check(self) -> dict[str, Any]:
        """Return status including the device path."""
        return {"source": self.name, "healthy": self.is_available, "path": self._path}
