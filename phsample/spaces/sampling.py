import random
import numpy as np

def sample_hypersphere(d,c,r,rng=random):
    """Samples a d-dimensional sphere uniformly, centered at c and with
    radius r"""
    assert(d == len(c))
    while True:
        v = np.array([rng.gauss(0,1) for ci in c])
        n = np.linalg.norm(v)
        #measure-zero event, redraw
        if n > 0: break
    return (np.asarray(c,dtype=float) + v*(r/n)).tolist()


def sample_hyperball(d,c,r,rng=random):
    """Samples a d-dimensional ball uniformly, centered at c and with
    radius r"""
    assert(d == len(c))
    rad = r*pow(rng.random(),1.0/d)
    return sample_hypersphere(d,c,rad,rng)


def sample_unit_ball(d,rng=random):
    """Samples the unit ball in R^d uniformly with respect to volume"""
    return sample_hyperball(d,[0.0]*d,1.0,rng)
