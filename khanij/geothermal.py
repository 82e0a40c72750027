"""Geothermal modelling: heat flow, thermal gradients, intrusions and metamorphic facies."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

_GAS_CONSTANT = 8.314462618  # J/(mol K)
_STANDARD_GRAVITY = 9.81  # m/s^2


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def heat_flux(
    conductivity: float,
    area: float,
    t_deep: float,
    t_surface: float,
    depth: float,
) -> Optional[float]:
    """Conductive geothermal heat flux in watts (Fourier's law).

    Q = k A (T_deep - T_surface) / depth. Returns None for a non-positive
    depth, negative conductivity or area, or non-finite input.
    """
    if not _finite(conductivity, area, t_deep, t_surface, depth):
        return None
    if depth <= 0.0 or conductivity < 0.0 or area < 0.0:
        return None
    return conductivity * area * (t_deep - t_surface) / depth


def temperature_at_depth(surface_temp_k: float, gradient_k_per_m: float, depth_m: float) -> float:
    """Temperature at depth from surface temperature and a linear geothermal gradient."""
    return surface_temp_k + gradient_k_per_m * depth_m


def rock_thermal_diffusivity(
    conductivity: float, density: float, specific_heat: float
) -> Optional[float]:
    """Thermal diffusivity k / (rho c) in m^2/s, or None for invalid properties."""
    if not _finite(conductivity, density, specific_heat):
        return None
    if conductivity < 0.0 or density <= 0.0 or specific_heat <= 0.0:
        return None
    return conductivity / (density * specific_heat)


def heat_stored(mass_kg: float, specific_heat: float, delta_t: float) -> float:
    """Heat stored in a rock body: Q = m c dT (joules)."""
    return mass_kg * specific_heat * delta_t


def lithostatic_pressure(density: float, gravity: float, depth_m: float) -> float:
    """Lithostatic pressure rho g h in pascals."""
    return density * gravity * depth_m


def gibbs_energy(enthalpy: float, temperature: float, entropy: float) -> float:
    """Gibbs free energy G = H - T S."""
    return enthalpy - temperature * entropy


def is_spontaneous(delta_h: float, temperature: float, delta_s: float) -> bool:
    """True when the reaction's Gibbs energy change is negative."""
    return gibbs_energy(delta_h, temperature, delta_s) < 0.0


def volatile_pressure(moles: float, temperature_k: float, volume_m3: float) -> Optional[float]:
    """Ideal-gas pressure (Pa) of a volatile phase in a pore volume.

    Returns None for a non-positive volume, negative moles or temperature,
    or non-finite input.
    """
    if not _finite(moles, temperature_k, volume_m3):
        return None
    if volume_m3 <= 0.0 or moles < 0.0 or temperature_k < 0.0:
        return None
    return moles * _GAS_CONSTANT * temperature_k / volume_m3


class MetamorphicFacies(Enum):
    """Metamorphic facies defined by pressure-temperature conditions."""

    ZEOLITE = "Zeolite"
    GREENSCHIST = "Greenschist"
    AMPHIBOLITE = "Amphibolite"
    GRANULITE = "Granulite"
    BLUESCHIST = "Blueschist"
    ECLOGITE = "Eclogite"
    CONTACT_HORNFELS = "ContactHornfels"


def classify_facies(temperature_c: float, pressure_gpa: float) -> MetamorphicFacies:
    """Classify metamorphic facies from temperature (degrees C) and pressure (GPa)."""
    if pressure_gpa > 1.2 and temperature_c > 450.0:
        return MetamorphicFacies.ECLOGITE
    if pressure_gpa > 0.6 and temperature_c < 500.0:
        return MetamorphicFacies.BLUESCHIST
    if temperature_c > 500.0 and pressure_gpa < 0.3:
        return MetamorphicFacies.CONTACT_HORNFELS
    if temperature_c > 700.0:
        return MetamorphicFacies.GRANULITE
    if temperature_c > 450.0:
        return MetamorphicFacies.AMPHIBOLITE
    if temperature_c > 200.0:
        return MetamorphicFacies.GREENSCHIST
    return MetamorphicFacies.ZEOLITE


def facies_at_depth(
    depth_km: float,
    gradient_c_per_km: float,
    surface_temp_c: float,
    rock_density: float,
) -> MetamorphicFacies:
    """Metamorphic facies at a depth for a linear gradient and lithostatic pressure."""
    temp_c = surface_temp_c + gradient_c_per_km * depth_km
    pressure_gpa = lithostatic_pressure(rock_density, _STANDARD_GRAVITY, depth_km * 1000.0) / 1e9
    return classify_facies(temp_c, pressure_gpa)


def intrusion_cooling(
    magma_temp_k: float,
    country_temp_k: float,
    half_width_m: float,
    diffusivity_m2_s: float,
    time_seconds: float,
) -> float:
    """Centre temperature (K) of a cooling intrusion after ``time_seconds``.

    T(t) = T_country + (T_magma - T_country) exp(-pi^2 alpha t / R^2).
    """
    decay = math.exp(-(math.pi**2) * diffusivity_m2_s * time_seconds / half_width_m**2)
    return country_temp_k + (magma_temp_k - country_temp_k) * decay


def intrusion_cooling_time(
    magma_temp_k: float,
    country_temp_k: float,
    target_temp_k: float,
    half_width_m: float,
    diffusivity_m2_s: float,
) -> Optional[float]:
    """Seconds for an intrusion centre to cool to ``target_temp_k``.

    Returns None unless the target lies strictly between the country-rock
    and magma temperatures.
    """
    if target_temp_k <= country_temp_k or target_temp_k >= magma_temp_k:
        return None
    ratio = (target_temp_k - country_temp_k) / (magma_temp_k - country_temp_k)
    return -(half_width_m**2) * math.log(ratio) / (math.pi**2 * diffusivity_m2_s)


def contact_aureole_temperature(
    distance_m: float,
    half_width_m: float,
    magma_temp_k: float,
    country_temp_k: float,
) -> float:
    """Temperature at a distance from an intrusion contact (exponential decay)."""
    return country_temp_k + (magma_temp_k - country_temp_k) * math.exp(-distance_m / half_width_m)


class Conductivity:
    """Thermal conductivities of common rock types in W/(m K)."""

    GRANITE = 2.5
    BASALT = 1.7
    SANDSTONE = 2.3
    LIMESTONE = 2.5
    MARBLE = 2.9
    SHALE = 1.5
    GNEISS = 2.7
    QUARTZITE = 5.0


class SpecificHeat:
    """Specific heat capacities of common rock types in J/(kg K)."""

    GRANITE = 790.0
    BASALT = 840.0
    SANDSTONE = 920.0
    LIMESTONE = 840.0
    MARBLE = 880.0
    SHALE = 760.0
    GNEISS = 800.0
    QUARTZITE = 740.0