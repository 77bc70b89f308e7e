import math
import pytest
from phsample.spaces.measure import unitNBallMeasure,prolateHyperspheroidMeasure,pathLength


def test_unit_ball_measure_low_dimensions():
    assert unitNBallMeasure(1) == pytest.approx(2.0)
    assert unitNBallMeasure(2) == pytest.approx(math.pi)
    assert unitNBallMeasure(3) == pytest.approx(4.0/3.0*math.pi)
    assert unitNBallMeasure(4) == pytest.approx(0.5*math.pi**2)


def test_unit_ball_measure_negative_dimension():
    with pytest.raises(ValueError):
        unitNBallMeasure(-1)


def test_ellipse_area():
    #semi-axes 10 and sqrt(75)
    assert prolateHyperspheroidMeasure(2,10.0,20.0) == pytest.approx(math.pi*10.0*math.sqrt(75.0))


def test_prolate_spheroid_volume():
    a = 3.0
    b = 0.5*math.sqrt(36.0-16.0)
    assert prolateHyperspheroidMeasure(3,4.0,6.0) == pytest.approx(4.0/3.0*math.pi*a*b*b)


def test_segment_length_in_one_dimension():
    assert prolateHyperspheroidMeasure(1,3.0,7.0) == pytest.approx(7.0)


def test_degenerate_measure_is_zero():
    assert prolateHyperspheroidMeasure(2,10.0,10.0) == 0.0
    assert prolateHyperspheroidMeasure(5,10.0,10.0) == 0.0


def test_infinite_diameter():
    assert math.isinf(prolateHyperspheroidMeasure(2,10.0,float('inf')))


def test_diameter_below_foci_distance():
    with pytest.raises(ValueError):
        prolateHyperspheroidMeasure(2,10.0,9.0)


def test_path_length():
    assert pathLength([0,0],[5,5],[10,0]) == pytest.approx(2*math.sqrt(50))
    assert pathLength([0,0],[3,0],[10,0]) == pytest.approx(10.0)
