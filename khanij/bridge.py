"""Conversions between geology parameters and material, thermal and chemical quantities."""

from __future__ import annotations


def mohs_to_vickers(mohs: float) -> float:
    """Approximate Vickers hardness (HV) from Mohs hardness: HV = 3 * Mohs^3.3.

    Non-positive input gives 0; other values are clamped to 1..10.
    """
    if mohs <= 0.0:
        return 0.0
    return 3.0 * min(max(mohs, 1.0), 10.0) ** 3.3


def porosity_to_permeability(porosity: float, grain_diameter_m: float) -> float:
    """Kozeny-Carman permeability (m^2): k = d^2 phi^3 / (180 (1 - phi)^2).

    Porosity is clamped to 0..0.99.
    """
    phi = min(max(porosity, 0.0), 0.99)
    one_minus_phi = 1.0 - phi
    if one_minus_phi <= 0.0:
        return 0.0
    return grain_diameter_m * grain_diameter_m * phi**3 / (180.0 * one_minus_phi * one_minus_phi)


def elastic_to_p_wave_velocity(youngs_modulus_pa: float, density_kg_m3: float) -> float:
    """P-wave velocity (m/s) of an isotropic rock, assuming Poisson's ratio 0.25."""
    if density_kg_m3 <= 0.0 or youngs_modulus_pa <= 0.0:
        return 0.0
    nu = 0.25
    factor = (1.0 - nu) / ((1.0 + nu) * (1.0 - 2.0 * nu))
    return (youngs_modulus_pa * factor / density_kg_m3) ** 0.5


def depth_to_temperature(
    surface_temperature_c: float, depth_m: float, gradient_c_per_km: float
) -> float:
    """Subsurface temperature (degrees C) from surface temperature and gradient."""
    return surface_temperature_c + gradient_c_per_km * depth_m / 1000.0


def conductivity_to_heat_flow(conductivity_w_per_m_k: float, gradient_c_per_m: float) -> float:
    """Conductive heat flow (W/m^2) from conductivity and temperature gradient."""
    return conductivity_w_per_m_k * gradient_c_per_m


def element_to_oxide_pct(si_pct: float, al_pct: float) -> tuple[float, float]:
    """Convert Si and Al weight percent to ``(SiO2_pct, Al2O3_pct)``."""
    return si_pct * 2.139, al_pct * 1.889


def grade_to_yield_kg_per_tonne(grade_percent: float, recovery_fraction: float) -> float:
    """Metal yield (kg per tonne of ore) from grade in percent and recovery fraction."""
    recovery = min(max(recovery_fraction, 0.0), 1.0)
    return (grade_percent / 100.0) * recovery * 1000.0