import math
import random
import numpy as np
import pytest
from phsample.spaces.prolatehyperspheroid import ProlateHyperspheroid
from phsample.spaces.measure import prolateHyperspheroidMeasure
from phsample.spaces.sampling import sample_unit_ball


def randomFoci(n,seed):
    rng = random.Random(seed)
    return [rng.uniform(-5,5) for i in range(n)],[rng.uniform(-5,5) for i in range(n)]


@pytest.mark.parametrize("n",[2,3,4,7])
def test_rotation_is_proper(n):
    f1,f2 = randomFoci(n,n)
    phs = ProlateHyperspheroid(n,f1,f2)
    C = phs.getRotation()
    assert np.allclose(C.T.dot(C),np.eye(n))
    assert np.linalg.det(C) == pytest.approx(1.0)
    a1 = (np.array(f2)-np.array(f1))/np.linalg.norm(np.array(f2)-np.array(f1))
    assert np.allclose(C[:,0],a1)


def test_radii():
    phs = ProlateHyperspheroid(3,[0,0,0],[10,0,0])
    assert phs.getRadii() is None
    phs.setTransverseDiameter(20.0)
    assert phs.getRadii() == pytest.approx([10.0,math.sqrt(75.0),math.sqrt(75.0)])


def test_transform_axes():
    phs = ProlateHyperspheroid(2,[0,0],[10,0])
    phs.setTransverseDiameter(20.0)
    assert phs.transform([0,0]) == pytest.approx([5,0])
    assert phs.transform([1,0]) == pytest.approx([15,0])
    assert phs.transform([-1,0]) == pytest.approx([-5,0])
    top = phs.transform([0,1])
    assert top[0] == pytest.approx(5.0)
    assert abs(top[1]) == pytest.approx(math.sqrt(75.0))


def test_transformed_ball_lies_in_phs():
    rng = random.Random(1)
    f1,f2 = randomFoci(4,11)
    phs = ProlateHyperspheroid(4,f1,f2)
    d = phs.getMinTransverseDiameter()*1.3
    phs.setTransverseDiameter(d)
    for i in range(300):
        x = phs.transform(sample_unit_ball(4,rng))
        assert phs.getPathLength(x) <= d + 1e-9
        assert phs.isInPhs(x) or phs.getPathLength(x) - d < 1e-9


def test_boundary_maps_to_boundary():
    phs = ProlateHyperspheroid(3,[1,2,3],[4,-2,0])
    d = phs.getMinTransverseDiameter() + 2.0
    phs.setTransverseDiameter(d)
    for s in ([1,0,0],[0,1,0],[0,0,-1],[0.6,0.8,0]):
        assert phs.getPathLength(phs.transform(s)) == pytest.approx(d)


def test_degenerate_collapses_to_segment():
    phs = ProlateHyperspheroid(2,[0,0],[10,0])
    phs.setTransverseDiameter(10.0)
    assert phs.getRadii() == [5.0,0.0]
    assert phs.getPhsMeasure() == 0.0
    for s in ([0,1],[0.5,0.7],[-0.3,-0.9]):
        x = phs.transform(s)
        assert all(not math.isnan(v) for v in x)
        assert x[1] == pytest.approx(0.0)
        assert 0.0 <= x[0] <= 10.0


def test_coincident_foci_is_sphere():
    phs = ProlateHyperspheroid(3,[1,1,1],[1,1,1])
    assert phs.getMinTransverseDiameter() == 0.0
    assert np.array_equal(phs.getRotation(),np.eye(3))
    phs.setTransverseDiameter(4.0)
    assert phs.getRadii() == pytest.approx([2.0,2.0,2.0])
    assert phs.transform([0,0,1]) == pytest.approx([1,1,3])


def test_one_dimensional_segment():
    phs = ProlateHyperspheroid(1,[8.0],[2.0])
    phs.setTransverseDiameter(10.0)
    ends = sorted([phs.transform([-1.0])[0],phs.transform([1.0])[0]])
    assert ends == pytest.approx([0.0,10.0])
    assert phs.getPhsMeasure() == pytest.approx(10.0)


def test_rebuild_is_deterministic():
    f1,f2 = randomFoci(5,2)
    a = ProlateHyperspheroid(5,f1,f2)
    b = ProlateHyperspheroid(5,f1,f2)
    d = a.getMinTransverseDiameter()*1.5
    a.setTransverseDiameter(d)
    b.setTransverseDiameter(d)
    assert np.array_equal(a.getRotation(),b.getRotation())
    assert a.getRadii() == b.getRadii()
    assert np.array_equal(a.transformation,b.transformation)


def test_same_diameter_keeps_transformation():
    phs = ProlateHyperspheroid(2,[0,0],[10,0])
    phs.setTransverseDiameter(20.0)
    T = phs.transformation
    phs.setTransverseDiameter(20.0)
    assert phs.transformation is T
    phs.setTransverseDiameter(25.0)
    assert phs.transformation is not T
    assert phs.getTransverseDiameter() == 25.0


def test_measure_matches_closed_form():
    phs = ProlateHyperspheroid(2,[0,0],[10,0])
    assert phs.getPhsMeasure(20.0) == pytest.approx(prolateHyperspheroidMeasure(2,10.0,20.0))
    #querying another diameter does not rebuild
    assert phs.getTransverseDiameter() is None


def test_invalid_use():
    with pytest.raises(ValueError):
        ProlateHyperspheroid(2,[0,0],[1,2,3])
    phs = ProlateHyperspheroid(2,[0,0],[10,0])
    with pytest.raises(RuntimeError):
        phs.transform([0,0])
    with pytest.raises(RuntimeError):
        phs.getPhsMeasure()
    with pytest.raises(ValueError):
        phs.setTransverseDiameter(9.0)
    with pytest.raises(ValueError):
        phs.setTransverseDiameter(float('inf'))


def test_transform_wrong_dimension():
    phs = ProlateHyperspheroid(2,[0,0],[10,0])
    phs.setTransverseDiameter(20.0)
    with pytest.raises(ValueError):
        phs.transform([0.0,0.0,0.0])
    with pytest.raises(ValueError):
        phs.transform([0.5])
