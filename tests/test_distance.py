import pytest

from moonphase.distance import EARTH_RADIUS, ONE_MILE, Distance


def test_units() -> None:
    d = Distance(earth_radii=60.4)
    assert d.km == pytest.approx(60.4 * EARTH_RADIUS)
    assert d.miles == pytest.approx(60.4 * EARTH_RADIUS / ONE_MILE)
    assert Distance(km=EARTH_RADIUS).earth_radii == pytest.approx(1.0)
    assert Distance(miles=1).km == ONE_MILE


def test_ordering_and_display() -> None:
    assert Distance(km=1) < Distance(miles=1)
    assert Distance(earth_radii=1) == Distance(km=EARTH_RADIUS)
    assert str(Distance(km=384400)) == '384,400 km'


def test_requires_a_unit() -> None:
    with pytest.raises(ValueError):
        Distance()
    with pytest.raises(AttributeError):
        Distance(km=1).furlongs
