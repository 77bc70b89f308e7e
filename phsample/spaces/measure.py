"""Closed-form measures and the path-length heuristic used by the informed
samplers."""

import math
import numpy as np


def unitNBallMeasure(n):
    """Lebesgue measure (volume) of the unit ball in R^n,
    pi^(n/2) / Gamma(n/2+1)"""
    if n < 0:
        raise ValueError("unitNBallMeasure: dimension must be non-negative")
    return math.pow(math.sqrt(math.pi),n) / math.gamma(0.5*n + 1.0)


def prolateHyperspheroidMeasure(n,dFoci,dTransverse):
    """Measure of the n-dimensional prolate hyperspheroid with foci dFoci
    apart and transverse diameter dTransverse.

    The major radius is dTransverse/2 and all n-1 minor radii are
    sqrt(dTransverse^2 - dFoci^2)/2.
    """
    if dTransverse < dFoci:
        raise ValueError("Transverse diameter "+str(dTransverse)+" cannot be less than the distance between the foci "+str(dFoci))
    if math.isinf(dTransverse):
        return float('inf')
    conjugate = math.sqrt(dTransverse*dTransverse - dFoci*dFoci)
    return unitNBallMeasure(n) * 0.5*dTransverse * math.pow(0.5*conjugate,n-1)


def pathLength(focus1,x,focus2):
    """The length of the straight-line path focus1 -> x -> focus2.  An
    admissible estimate of the cost of a path-length solution through x."""
    x = np.asarray(x,dtype=float)
    return float(np.linalg.norm(x-np.asarray(focus1,dtype=float)) + np.linalg.norm(np.asarray(focus2,dtype=float)-x))
