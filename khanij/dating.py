"""Radiometric dating: decay, isotope systems, C-14, isochrons and closure temperatures."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


def parent_remaining(decay_constant: float, time_years: float) -> float:
    """Fraction of the parent isotope left after ``time_years`` (N/N0 = exp(-lambda t))."""
    return math.exp(-decay_constant * time_years)


def age_from_ratio(decay_constant: float, daughter_parent_ratio: float) -> Optional[float]:
    """Age in years from the radiogenic daughter/parent ratio.

    t = ln(1 + D/P) / lambda. Returns None for a non-positive decay constant
    or a negative ratio.
    """
    if decay_constant <= 0.0 or daughter_parent_ratio < 0.0:
        return None
    return math.log1p(daughter_parent_ratio) / decay_constant


def half_life(decay_constant: float) -> float:
    """Half-life from a decay constant: ln(2) / lambda."""
    return math.log(2.0) / decay_constant


def decay_constant(half_life_years: float) -> float:
    """Decay constant from a half-life: ln(2) / t_half."""
    return math.log(2.0) / half_life_years


class IsotopeSystem(Enum):
    """Common radiometric dating isotope systems."""

    U238PB206 = "U238Pb206"
    U235PB207 = "U235Pb207"
    K40AR40 = "K40Ar40"
    RB87SR87 = "Rb87Sr87"
    C14 = "C14"
    SM147ND143 = "Sm147Nd143"
    LU176HF176 = "Lu176Hf176"

    def decay_constant(self) -> float:
        """Decay constant lambda in 1/yr."""
        return _DECAY_CONSTANTS[self]

    def half_life_years(self) -> float:
        """Half-life in years."""
        return half_life(self.decay_constant())

    def useful_range(self) -> tuple[float, float]:
        """Approximate useful age range in years as ``(min, max)``."""
        return _USEFUL_RANGES[self]

    def age(self, daughter_parent_ratio: float) -> Optional[float]:
        """Age in years from a daughter/parent ratio, or None if invalid."""
        return age_from_ratio(self.decay_constant(), daughter_parent_ratio)


_DECAY_CONSTANTS = {
    IsotopeSystem.U238PB206: 1.55125e-10,
    IsotopeSystem.U235PB207: 9.8485e-10,
    IsotopeSystem.K40AR40: 5.554e-10,
    IsotopeSystem.RB87SR87: 1.42e-11,
    IsotopeSystem.C14: 1.2097e-4,
    IsotopeSystem.SM147ND143: 6.54e-12,
    IsotopeSystem.LU176HF176: 1.867e-11,
}

_USEFUL_RANGES = {
    IsotopeSystem.C14: (100.0, 50_000.0),
    IsotopeSystem.K40AR40: (100_000.0, 4.6e9),
    IsotopeSystem.U238PB206: (1e6, 4.6e9),
    IsotopeSystem.U235PB207: (1e6, 4.6e9),
    IsotopeSystem.RB87SR87: (10e6, 4.6e9),
    IsotopeSystem.SM147ND143: (100e6, 4.6e9),
    IsotopeSystem.LU176HF176: (100e6, 4.6e9),
}


def c14_age(fraction_modern: float) -> Optional[float]:
    """Radiocarbon age in years BP from the fraction of modern C-14.

    Returns None unless 0 < fraction_modern <= 1.
    """
    if fraction_modern <= 0.0 or fraction_modern > 1.0:
        return None
    return -math.log(fraction_modern) / IsotopeSystem.C14.decay_constant()


def c14_fraction_remaining(age_years: float) -> float:
    """Fraction of modern C-14 left at the given age."""
    return parent_remaining(IsotopeSystem.C14.decay_constant(), age_years)


@dataclass(frozen=True)
class IsochronPoint:
    """One isochron sample: x = parent/stable ratio, y = daughter/stable ratio."""

    x: float
    y: float


def isochron_age(
    system: IsotopeSystem, points: Iterable[IsochronPoint]
) -> Optional[tuple[float, float]]:
    """Isochron age and initial ratio by least-squares regression.

    The slope equals exp(lambda t) - 1. Returns ``(age_years, initial_ratio)``,
    or None with fewer than two points, degenerate x values or a negative slope.
    """
    pts = list(points)
    if len(pts) < 2:
        return None
    n = float(len(pts))
    sum_x = sum(p.x for p in pts)
    sum_y = sum(p.y for p in pts)
    sum_xy = sum(p.x * p.y for p in pts)
    sum_x2 = sum(p.x * p.x for p in pts)

    denom = n * sum_x2 - sum_x * sum_x
    if abs(denom) < sys.float_info.epsilon:
        return None

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n
    if slope < 0.0:
        return None

    age = math.log1p(slope) / system.decay_constant()
    return age, intercept


_CLOSURE_TEMPERATURES = {
    (IsotopeSystem.K40AR40, "hornblende"): 530.0,
    (IsotopeSystem.K40AR40, "muscovite"): 350.0,
    (IsotopeSystem.K40AR40, "biotite"): 310.0,
    (IsotopeSystem.K40AR40, "feldspar"): 150.0,
    (IsotopeSystem.U238PB206, "zircon"): 900.0,
    (IsotopeSystem.U238PB206, "monazite"): 700.0,
    (IsotopeSystem.U238PB206, "titanite"): 600.0,
    (IsotopeSystem.U238PB206, "apatite"): 450.0,
    (IsotopeSystem.U235PB207, "zircon"): 900.0,
    (IsotopeSystem.RB87SR87, "muscovite"): 500.0,
    (IsotopeSystem.RB87SR87, "biotite"): 310.0,
    (IsotopeSystem.RB87SR87, "feldspar"): 200.0,
    (IsotopeSystem.SM147ND143, "garnet"): 700.0,
    (IsotopeSystem.LU176HF176, "garnet"): 700.0,
}


def closure_temperature(system: IsotopeSystem, mineral: str) -> Optional[float]:
    """Approximate closure temperature (degrees C) for a system-mineral pair, or None."""
    return _CLOSURE_TEMPERATURES.get((system, mineral.lower()))