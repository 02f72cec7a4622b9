"""A simple DC blocking filter (first-order IIR high-pass)."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass, replace

DEFAULT_CUTOFF_FREQUENCY = 20.0
# A cheap approximation used when no sample rate is given.
DEFAULT_R_CONSTANT = 0.995


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass
class DCBlock:
    """Filter implementing y(n) = x(n) - x(n-1) + R * y(n-1)."""

    prev_input: float = 0.0
    prev_output: float = 0.0
    r: float = DEFAULT_R_CONSTANT
    cutoff_frequency: float = DEFAULT_CUTOFF_FREQUENCY
    sample_rate: float = 1.0

    def with_cutoff_frequency(self, cutoff_frequency: float) -> DCBlock:
        return replace(self, cutoff_frequency=cutoff_frequency)._with_computed_r()

    def with_sample_rate(self, sample_rate: float) -> DCBlock:
        return replace(self, sample_rate=sample_rate)._with_computed_r()

    def _with_computed_r(self) -> DCBlock:
        nyquist = self.sample_rate / 2.0
        ratio = _divide(2.0 * math.pi * self.cutoff_frequency, self.sample_rate)
        if self.cutoff_frequency > nyquist:
            try:
                r = math.exp(-ratio)
            except OverflowError:
                r = math.inf
        else:
            # Cheaper approximation that holds well below the Nyquist frequency.
            r = 1.0 - ratio
        self.r = r if math.isfinite(r) else DEFAULT_R_CONSTANT
        return self

    def process(self, sample: float) -> float:
        """Filter one sample, updating the filter state."""
        output = sample - self.prev_input + self.r * self.prev_output
        self.prev_input = sample
        self.prev_output = output
        return output

    def process_signal(self, signal: MutableSequence[float]) -> None:
        """Filter a mutable sequence in place; the filter state is left unchanged."""
        saved = replace(self)
        signal[:] = [self.process(sample) for sample in signal]
        self.prev_input = saved.prev_input
        self.prev_output = saved.prev_output

    def process_signal_map(self, signal: Iterable[float]) -> Iterator[float]:
        """Lazily filter ``signal`` with a copy of this filter."""
        block = replace(self)
        return (block.process(sample) for sample in signal)