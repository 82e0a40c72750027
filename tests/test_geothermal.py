import pytest

from khanij.geothermal import (
    Conductivity,
    MetamorphicFacies,
    SpecificHeat,
    classify_facies,
    contact_aureole_temperature,
    facies_at_depth,
    gibbs_energy,
    heat_flux,
    heat_stored,
    intrusion_cooling,
    intrusion_cooling_time,
    is_spontaneous,
    lithostatic_pressure,
    rock_thermal_diffusivity,
    temperature_at_depth,
    volatile_pressure,
)


def test_temperature_increases_with_depth():
    surface = 288.15
    gradient = 0.025
    t_1km = temperature_at_depth(surface, gradient, 1000.0)
    t_5km = temperature_at_depth(surface, gradient, 5000.0)
    assert t_1km > surface
    assert t_5km > t_1km
    assert t_1km == pytest.approx(313.15, abs=0.01)


def test_lithostatic_pressure_at_depth():
    assert lithostatic_pressure(2700.0, 9.81, 1000.0) == pytest.approx(26_487_000.0, abs=1000.0)


def test_heat_flux_positive_downward():
    q = heat_flux(Conductivity.GRANITE, 1.0, 373.15, 288.15, 1000.0)
    assert q is not None
    assert q > 0.0


def test_heat_flux_zero_depth_is_none():
    assert heat_flux(2.5, 1.0, 373.15, 288.15, 0.0) is None


def test_granite_thermal_diffusivity():
    alpha = rock_thermal_diffusivity(Conductivity.GRANITE, 2700.0, SpecificHeat.GRANITE)
    assert alpha is not None
    assert 1e-7 < alpha < 1e-5


def test_thermal_diffusivity_invalid_density():
    assert rock_thermal_diffusivity(2.5, 0.0, 790.0) is None


def test_heat_storage():
    assert heat_stored(1.0, SpecificHeat.GRANITE, 100.0) == pytest.approx(79_000.0, abs=1000.0)


def test_gibbs_energy_negative_for_exothermic():
    assert gibbs_energy(-50_000.0, 298.15, 100.0) < 0.0


def test_gibbs_spontaneity():
    assert is_spontaneous(-50_000.0, 298.15, 100.0)
    assert not is_spontaneous(50_000.0, 298.15, 10.0)


def test_volatile_pressure_in_pore():
    p = volatile_pressure(1.0, 473.15, 0.001)
    assert p is not None
    assert 3_000_000.0 < p < 5_000_000.0


def test_volatile_pressure_zero_volume_is_none():
    assert volatile_pressure(1.0, 473.15, 0.0) is None


@pytest.mark.parametrize(
    ("temperature", "pressure", "expected"),
    [
        (150.0, 0.1, MetamorphicFacies.ZEOLITE),
        (350.0, 0.4, MetamorphicFacies.GREENSCHIST),
        (550.0, 0.6, MetamorphicFacies.AMPHIBOLITE),
        (800.0, 0.8, MetamorphicFacies.GRANULITE),
        (300.0, 1.0, MetamorphicFacies.BLUESCHIST),
        (600.0, 1.5, MetamorphicFacies.ECLOGITE),
        (600.0, 0.2, MetamorphicFacies.CONTACT_HORNFELS),
    ],
)
def test_classify_facies(temperature, pressure, expected):
    assert classify_facies(temperature, pressure) == expected


def test_facies_at_depth_shallow_is_zeolite():
    assert facies_at_depth(5.0, 25.0, 15.0, 2700.0) == MetamorphicFacies.ZEOLITE


def test_facies_at_depth_deep_is_higher_grade():
    shallow = facies_at_depth(5.0, 25.0, 15.0, 2700.0)
    deep = facies_at_depth(20.0, 25.0, 15.0, 2700.0)
    assert deep != shallow
    assert shallow == MetamorphicFacies.ZEOLITE


def test_intrusion_starts_at_magma_temp():
    assert intrusion_cooling(1473.0, 573.0, 50.0, 1e-6, 0.0) == pytest.approx(1473.0, abs=0.01)


def test_intrusion_cools_over_time():
    early = intrusion_cooling(1473.0, 573.0, 50.0, 1e-6, 1_000_000.0)
    late = intrusion_cooling(1473.0, 573.0, 50.0, 1e-6, 100_000_000.0)
    assert late < early
    assert late >= 573.0


def test_intrusion_approaches_country_rock():
    assert intrusion_cooling(1473.0, 573.0, 50.0, 1e-6, 1e12) == pytest.approx(573.0, abs=1.0)


def test_cooling_time_roundtrip():
    target = 800.0
    time = intrusion_cooling_time(1473.0, 573.0, target, 50.0, 1e-6)
    assert time is not None and time > 0.0
    recovered = intrusion_cooling(1473.0, 573.0, 50.0, 1e-6, time)
    assert recovered == pytest.approx(target, abs=0.1)


def test_cooling_time_invalid_target():
    assert intrusion_cooling_time(1473.0, 573.0, 500.0, 50.0, 1e-6) is None
    assert intrusion_cooling_time(1473.0, 573.0, 1500.0, 50.0, 1e-6) is None


def test_contact_aureole_at_contact():
    assert contact_aureole_temperature(0.0, 50.0, 1473.0, 573.0) == pytest.approx(1473.0, abs=0.01)


def test_contact_aureole_decays_with_distance():
    near = contact_aureole_temperature(10.0, 50.0, 1473.0, 573.0)
    far = contact_aureole_temperature(100.0, 50.0, 1473.0, 573.0)
    assert near > far
    assert far > 573.0


def test_rock_property_tables_feed_calculations():
    assert heat_stored(1.0, SpecificHeat.SANDSTONE, 1.0) == pytest.approx(920.0)
    quartzite_flux = heat_flux(Conductivity.QUARTZITE, 1.0, 373.15, 288.15, 1000.0)
    shale_flux = heat_flux(Conductivity.SHALE, 1.0, 373.15, 288.15, 1000.0)
    assert quartzite_flux is not None and shale_flux is not None
    assert quartzite_flux > shale_flux