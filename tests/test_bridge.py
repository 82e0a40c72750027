import pytest

from khanij.bridge import (
    conductivity_to_heat_flow,
    depth_to_temperature,
    elastic_to_p_wave_velocity,
    element_to_oxide_pct,
    grade_to_yield_kg_per_tonne,
    mohs_to_vickers,
    porosity_to_permeability,
)


def test_mohs_to_vickers_quartz():
    hv = mohs_to_vickers(7.0)
    assert 500.0 < hv < 2000.0


def test_mohs_to_vickers_talc():
    assert mohs_to_vickers(1.0) < 100.0
    assert mohs_to_vickers(1.0) == pytest.approx(3.0)


def test_mohs_zero():
    assert mohs_to_vickers(0.0) == 0.0


def test_mohs_clamped_above_ten():
    assert mohs_to_vickers(15.0) == pytest.approx(mohs_to_vickers(10.0))


def test_mohs_monotonic():
    assert mohs_to_vickers(3.0) < mohs_to_vickers(5.0) < mohs_to_vickers(9.0)


def test_porosity_to_permeability_sandstone():
    k = porosity_to_permeability(0.2, 0.0005)
    assert 1e-14 < k < 1e-10


def test_porosity_zero():
    assert porosity_to_permeability(0.0, 0.001) == 0.0


def test_porosity_clamped():
    assert porosity_to_permeability(1.5, 0.001) == pytest.approx(
        porosity_to_permeability(0.99, 0.001)
    )


def test_p_wave_granite():
    vp = elastic_to_p_wave_velocity(50e9, 2700.0)
    assert 3000.0 < vp < 7000.0


def test_p_wave_zero_density():
    assert elastic_to_p_wave_velocity(50e9, 0.0) == 0.0


def test_p_wave_zero_modulus():
    assert elastic_to_p_wave_velocity(0.0, 2700.0) == 0.0


def test_depth_temp_surface():
    assert depth_to_temperature(15.0, 0.0, 30.0) == pytest.approx(15.0, abs=0.01)


def test_depth_temp_1km():
    assert depth_to_temperature(15.0, 1000.0, 30.0) == pytest.approx(45.0, abs=0.01)


def test_heat_flow_basic():
    assert conductivity_to_heat_flow(3.0, 0.03) == pytest.approx(0.09, abs=0.001)


def test_element_to_oxide_silicon():
    sio2, al2o3 = element_to_oxide_pct(46.7, 0.0)
    assert abs(sio2 - 99.9) < 1.0
    assert al2o3 == 0.0


def test_element_to_oxide_aluminium():
    _, al2o3 = element_to_oxide_pct(0.0, 10.0)
    assert al2o3 == pytest.approx(18.89)


def test_grade_to_yield_copper():
    assert grade_to_yield_kg_per_tonne(1.0, 0.9) == pytest.approx(9.0, abs=0.01)


def test_grade_to_yield_zero_recovery():
    assert grade_to_yield_kg_per_tonne(5.0, 0.0) == 0.0


def test_grade_to_yield_recovery_clamped():
    assert grade_to_yield_kg_per_tonne(1.0, 2.0) == pytest.approx(10.0)