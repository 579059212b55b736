import pytest

from mmmsim.models import FourthOrderSystem, ThirdOrderSystem


def test_from_time_constants_structure():
    system = ThirdOrderSystem.from_time_constants(2.0, 3.0, 5.0, 7.0)
    assert system.a2 == 2.0
    assert system.a3 == pytest.approx(6.0)
    assert system.b1 == system.a1
    assert system.b0 == system.a0
    assert system.a1 == pytest.approx(system.a2 * system.a0)


def test_derivatives_shift_state():
    system = ThirdOrderSystem(a3=2.0, a2=0.0, a1=0.0, a0=0.0, b1=0.0, b0=4.0)
    d = system.derivatives((1.0, 2.0, 3.0), u=1.0, u1p=0.0)
    assert d[0] == 2.0
    assert d[1] == 3.0
    assert d[2] == pytest.approx(2.0)


def test_derivatives_at_equilibrium_is_zero():
    system = ThirdOrderSystem(a3=1.0, a2=6.0, a1=11.0, a0=6.0, b1=2.0, b0=1.0)
    equilibrium = system.b0 / system.a0
    d = system.derivatives((equilibrium, 0.0, 0.0), u=1.0, u1p=0.0)
    assert d == pytest.approx((0.0, 0.0, 0.0))


def test_normalized_has_unit_leading_coefficient_and_same_dynamics():
    system = ThirdOrderSystem(a3=4.0, a2=8.0, a1=2.0, a0=1.0, b1=3.0, b0=5.0)
    norm = system.normalized()
    assert norm.a3 == 1.0
    state = (0.3, -0.2, 0.7)
    assert norm.derivatives(state, 1.5, 0.5) == pytest.approx(system.derivatives(state, 1.5, 0.5))


def test_zero_leading_coefficient_rejected():
    system = ThirdOrderSystem.from_time_constants(0.0, 1.0, 1.0, 1.0)
    with pytest.raises(ValueError):
        system.normalized()
    with pytest.raises(ValueError):
        system.derivatives((0.0, 0.0, 0.0), 1.0, 0.0)


def test_fourth_order_equilibrium():
    system = FourthOrderSystem(a3=10.0, a2=35.0, a1=50.0, a0=24.0, b3=0.0, b2=0.0, b1=0.0, b0=24.0)
    assert system.highest_derivative(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0) == pytest.approx(0.0)


def test_fourth_order_input_terms():
    system = FourthOrderSystem(a3=0.0, a2=0.0, a1=0.0, a0=0.0, b3=1.0, b2=1.0, b1=1.0, b0=1.0)
    result = system.highest_derivative(0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0)
    assert result == pytest.approx(1.0 + 2.0 + 3.0 + 4.0)