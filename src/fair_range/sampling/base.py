"""Base class for bounded integer samplers.

A sampler turns a random bit source into integers in an inclusive range
``[low, high]``. Samplers hold only immutable settings (draw width, retry
cap) plus a reference to their source, so they are as thread-safe as the
source they wrap.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from fair_range.sampling.plan import RejectionPlan, range_size

if TYPE_CHECKING:
    from fair_range.config import FairRangeConfig
    from fair_range.entropy.base import EntropySource
    from fair_range.sampling.types import SampleResult


class BoundedSampler(ABC):
    """Abstract base class for bounded samplers.

    Args:
        source: Random bit source to draw from. The sampler does not own
            it and never closes it.
        width: Fixed bits per raw draw, or ``None`` to use the smallest
            width covering each requested range.
        max_draws: Cap on draws per sample, or ``None`` for no cap.
    """

    def __init__(
        self,
        source: EntropySource,
        width: int | None = None,
        max_draws: int | None = None,
    ) -> None:
        if width is not None and width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        if max_draws is not None and max_draws < 1:
            raise ValueError(f"max_draws must be >= 1, got {max_draws}")
        self._source = source
        self._width = width
        self._max_draws = max_draws

    @classmethod
    def from_config(cls, config: FairRangeConfig, source: EntropySource) -> BoundedSampler:
        """Build a sampler from config; zero width or cap means "unset"."""
        return cls(
            source,
            width=config.source_width or None,
            max_draws=config.max_draws or None,
        )

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier (e.g., ``'rejection'``)."""

    @property
    def source(self) -> EntropySource:
        return self._source

    @property
    def width(self) -> int | None:
        return self._width

    @property
    def max_draws(self) -> int | None:
        return self._max_draws

    def plan(self, low: int, high: int) -> RejectionPlan:
        """Return the draw plan for ``[low, high]``.

        Raises:
            InvalidRangeError: If the range is invalid or the fixed width
                is too narrow for it.
        """
        return RejectionPlan.build(range_size(low, high), self._width)

    @abstractmethod
    def draw(self, low: int, high: int) -> SampleResult:
        """Sample one integer from ``[low, high]`` and report how.

        Raises:
            InvalidRangeError: If ``high < low`` or a bound is not an int.
            EntropyUnavailableError: If the source fails; never retried.
        """

    def sample(self, low: int, high: int) -> int:
        """Sample one integer from ``[low, high]``."""
        return self.draw(low, high).value
