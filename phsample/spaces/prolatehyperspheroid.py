import math
import numpy as np
from .measure import prolateHyperspheroidMeasure,pathLength

class ProlateHyperspheroid:
    """A prolate hyperspheroid (PHS) in R^n: the set of points x with
    |f1-x| + |x-f2| <= d for two foci f1, f2 and a transverse diameter d.

    The PHS is described by the affine map
        x = C * diag(r) * s + centre
    which takes a point s of the unit n-ball into the PHS, uniformly.  C is
    a rotation taking the first axis onto the focus-to-focus direction and
    r = [d/2, sqrt(d^2-dmin^2)/2, ..., sqrt(d^2-dmin^2)/2].

    The rotation depends only on the foci and is computed once.  The
    transformation is rebuilt only when setTransverseDiameter() is called
    with a different value.
    """
    def __init__(self,n,focus1,focus2):
        if n < 1:
            raise ValueError("ProlateHyperspheroid: dimension must be at least 1")
        if len(focus1) != n or len(focus2) != n:
            raise ValueError("ProlateHyperspheroid: foci must be of dimension "+str(n))
        self.n = n
        self.focus1 = np.array(focus1,dtype=float)
        self.focus2 = np.array(focus2,dtype=float)
        self.centre = 0.5*(self.focus1+self.focus2)
        self.minTransverseDiameter = float(np.linalg.norm(self.focus2-self.focus1))
        self.transverseDiameter = None
        self.radii = None
        self.transformation = None
        self.rotation = self._computeRotation()

    def _computeRotation(self):
        """Rotation matrix C with C[:,0] the unit vector from focus1 to
        focus2 (up to sign when n = 1) and det(C) = +1"""
        if self.minTransverseDiameter < np.finfo(float).eps:
            #coincident foci: the PHS is a hypersphere, any frame will do
            return np.eye(self.n)
        a1 = (self.focus2-self.focus1)/self.minTransverseDiameter
        e1 = np.zeros(self.n)
        e1[0] = 1.0
        U,S,Vt = np.linalg.svd(np.outer(a1,e1))
        lam = np.eye(self.n)
        lam[-1,-1] = np.linalg.det(U)*np.linalg.det(Vt)
        return U.dot(lam).dot(Vt)

    def setTransverseDiameter(self,transverseDiameter):
        """Sets the transverse diameter, rebuilding the transformation if it
        has changed."""
        if transverseDiameter < self.minTransverseDiameter:
            raise ValueError("Transverse diameter "+str(transverseDiameter)+" cannot be less than the distance between the foci "+str(self.minTransverseDiameter))
        if math.isinf(transverseDiameter) or math.isnan(transverseDiameter):
            raise ValueError("Transverse diameter must be finite")
        if self.transverseDiameter == transverseDiameter:
            return
        conjugate = math.sqrt(transverseDiameter*transverseDiameter - self.minTransverseDiameter*self.minTransverseDiameter)
        radii = np.empty(self.n)
        radii[0] = 0.5*transverseDiameter
        radii[1:] = 0.5*conjugate
        self.radii = radii
        self.transformation = self.rotation*radii[np.newaxis,:]
        self.transverseDiameter = transverseDiameter

    def transform(self,sphere):
        """Maps a point of the unit n-ball into the PHS"""
        if self.transformation is None:
            raise RuntimeError("ProlateHyperspheroid: the transverse diameter has not been set")
        if len(sphere) != self.n:
            raise ValueError("ProlateHyperspheroid: expected a point of dimension "+str(self.n)+", got "+str(len(sphere)))
        return (self.transformation.dot(np.asarray(sphere,dtype=float)) + self.centre).tolist()

    def isInPhs(self,x):
        if self.transverseDiameter is None:
            raise RuntimeError("ProlateHyperspheroid: the transverse diameter has not been set")
        return self.getPathLength(x) <= self.transverseDiameter

    def getPathLength(self,x):
        """Length of the path focus1 -> x -> focus2"""
        return pathLength(self.focus1,x,self.focus2)

    def getPhsMeasure(self,transverseDiameter=None):
        """The measure of the PHS, for the current transverse diameter or the
        one given."""
        if transverseDiameter is None:
            if self.transverseDiameter is None:
                raise RuntimeError("ProlateHyperspheroid: the transverse diameter has not been set")
            transverseDiameter = self.transverseDiameter
        return prolateHyperspheroidMeasure(self.n,self.minTransverseDiameter,transverseDiameter)

    def getMinTransverseDiameter(self):
        return self.minTransverseDiameter

    def getTransverseDiameter(self):
        return self.transverseDiameter

    def getPhsDimension(self):
        return self.n

    def getCentre(self):
        return self.centre.tolist()

    def getRotation(self):
        return self.rotation.copy()

    def getRadii(self):
        if self.radii is None: return None
        return self.radii.tolist()

    def getFoci(self):
        return self.focus1.tolist(),self.focus2.tolist()
