"""Random bit source subsystem for fair-range.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from fair_range.entropy import EntropySource, EntropySourceRegistry
    from fair_range.entropy import SystemEntropySource, MockUniformSource
"""

from fair_range.entropy.base import EntropySource
from fair_range.entropy.device import DeviceEntropySource
from fair_range.entropy.fallback import FallbackEntropySource
from fair_range.entropy.mock import MockUniformSource
from fair_range.entropy.registry import EntropySourceRegistry, register_entropy_source
from fair_range.entropy.scripted import ScriptedSource
from fair_range.entropy.system import SystemEntropySource

__all__ = [
    "DeviceEntropySource",
    "EntropySource",
    "EntropySourceRegistry",
    "FallbackEntropySource",
    "MockUniformSource",
    "ScriptedSource",
    "SystemEntropySource",
    "register_entropy_source",
]
