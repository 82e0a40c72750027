"""Glacier and ice sheet dynamics.

Covers Glen's flow law, basal sliding, mass balance, equilibrium line
altitude, isostatic adjustment and depth-integrated ice velocity.
"""

from __future__ import annotations

import math
from enum import Enum

_RHO_ICE = 917.0  # kg/m^3
_RHO_MANTLE = 3300.0  # kg/m^3
_G = 9.81  # m/s^2
_SECONDS_PER_YEAR = 365.25 * 24.0 * 3600.0

# Reference Glen flow-law parameter at -10 degrees C (Pa^-3 s^-1), for n = 3.
_A_REF = 2.4e-24
_T_REF_C = -10.0
# A doubles for every 10 degrees C of warming.
_DOUBLING_INTERVAL = 10.0


class GlacierType(Enum):
    """Classification of glacier morphology."""

    ALPINE = "Alpine"
    ICE_SHEET = "IceSheet"
    ICE_CAP = "IceCap"
    PIEDMONT = "Piedmont"
    TIDE_WATER = "TideWater"


def _powf(base: float, exponent: float) -> float:
    """Real power; NaN where the result would not be real."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan


def _flow_parameter_a(temperature_c: float) -> float:
    """Temperature-dependent flow parameter A(T) = A0 * 2^((T - T_ref) / 10)."""
    exponent = (temperature_c - _T_REF_C) / _DOUBLING_INTERVAL
    return _A_REF * 2.0**exponent


def glen_flow_law(stress_pa: float, temperature_c: float, n: float) -> float:
    """Strain rate (1/s) from Glen's flow law: A(T) * stress^n."""
    return _flow_parameter_a(temperature_c) * _powf(stress_pa, n)


def basal_sliding_velocity(basal_shear_stress: float, effective_pressure: float) -> float:
    """Weertman-style basal sliding velocity (m/s): k * tau^3 / N.

    Returns 0 for a non-positive effective pressure.
    """
    k = 1e-15
    p = 3.0
    q = 1.0
    if effective_pressure <= 0.0:
        return 0.0
    return k * _powf(basal_shear_stress, p) / _powf(effective_pressure, q)


def mass_balance(accumulation_m_yr: float, ablation_m_yr: float) -> float:
    """Net mass balance in m/yr water equivalent: accumulation - ablation."""
    return accumulation_m_yr - ablation_m_yr


def equilibrium_line_altitude(summit_m: float, terminus_m: float) -> float:
    """First-order equilibrium line altitude: midpoint of summit and terminus."""
    return (summit_m + terminus_m) / 2.0


def isostatic_depression(ice_thickness_m: float) -> float:
    """Crustal depression (m) under an ice load in isostatic equilibrium."""
    return ice_thickness_m * (_RHO_ICE / _RHO_MANTLE)


def isostatic_rebound_time(depression_m: float, viscosity_pa_s: float) -> float:
    """Isostatic relaxation time in years: eta / (rho_mantle * g * 100).

    The depression is accepted for context only; the time depends on
    mantle viscosity and density.
    """
    del depression_m
    tau_seconds = viscosity_pa_s / (_RHO_MANTLE * _G * 100.0)
    return tau_seconds / _SECONDS_PER_YEAR


def ice_velocity_depth_integrated(
    surface_slope: float, thickness_m: float, temperature_c: float
) -> float:
    """Shallow-ice surface velocity in m/yr with n = 3.

    v = (2A / (n + 1)) * (rho g sin(alpha))^n * H^(n + 1), slope in radians.
    """
    n = 3.0
    a = _flow_parameter_a(temperature_c)
    driving_stress = _RHO_ICE * _G * math.sin(surface_slope)
    velocity_m_s = (
        (2.0 * a / (n + 1.0)) * _powf(driving_stress, n) * _powf(thickness_m, n + 1.0)
    )
    return velocity_m_s * _SECONDS_PER_YEAR