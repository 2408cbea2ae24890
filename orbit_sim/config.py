"""
Orbit Simulator - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
so headless runs can use different timing, stopping and staging parameters
without modifying global constants.
"""

from dataclasses import dataclass, replace

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for a headless simulation run.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Timing
      2. Stopping conditions
      3. Staging
      4. Tolerances
      5. Misc
    """

    # ── 1. Timing ────────────────────────────────────────────────────────
    timer_interval: float = C.TIMER_INTERVAL    # s between updates
    time_ratio: float = C.DEFAULT_TIME_RATIO    # simulated s per real s

    # ── 2. Stopping conditions ───────────────────────────────────────────
    max_time: float = C.MAX_TIME
    target_height_km: float = C.TARGET_HEIGHT_KM

    # ── 3. Staging ───────────────────────────────────────────────────────
    # Eject the active stage as soon as its fuel runs out
    auto_eject: bool = True

    # ── 4. Tolerances ────────────────────────────────────────────────────
    validate: bool = True
    tolerance: float = C.DECIMAL_TOLERANCE

    # ── 5. Misc ──────────────────────────────────────────────────────────
    verbose: bool = True

    @property
    def step_size(self) -> float:
        """Simulated seconds advanced per update."""
        return self.timer_interval * self.time_ratio

    def with_time_ratio(self, increment: int) -> 'SimulationConfig':
        """
        Move the time ratio `increment` places along TIME_RATIO_VALUES.

        The position is signed: position n >= 0 gives values[n] and
        position -n gives 1 / values[n], so stepping down past 1x slows
        time (1, 1/2, 1/5, ...). Both ends stop at the last value.
        """
        values = C.TIME_RATIO_VALUES
        if self.time_ratio >= 1.0:
            index = _nearest_index(values, self.time_ratio)
        else:
            index = -_nearest_index(values, 1.0 / self.time_ratio)
        index += increment
        actual = min(abs(index), len(values) - 1)
        if index >= 0:
            ratio = float(values[actual])
        else:
            ratio = 1.0 / values[actual]
        return replace(self, time_ratio=ratio)


def _nearest_index(values, ratio: float) -> int:
    return min(range(len(values)), key=lambda i: abs(values[i] - ratio))


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(timer_interval: float = 1.0, max_time: float = 10.0,
                       **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(timer_interval=timer_interval, max_time=max_time, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
