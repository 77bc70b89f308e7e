from .metric import *
from .sets import *
import random
import math


class ConfigurationSpace(Set):
    """A base class for a configuration space. At a minimum, subclasses
    should override the sample() and feasible() methods."""
    def __init__(self):
        pass

    def dimension(self):
        """Returns the number of entries of a configuration"""
        try:
            x = self.sample()
            return len(x)
        except NotImplementedError:
            raise NotImplementedError()

    def intrinsicDimension(self):
        """Returns the number of true degrees of freedom, which may be
        less than dimension() if the representation is redundant."""
        return self.dimension()

    def sample(self,rng=random):
        """Sample a random configuration from the space"""
        raise NotImplementedError("ConfigurationSpace is unbounded")

    def feasible(self,x):
        """Return true if the configuration is feasible"""
        return True

    def contains(self,x):
        return self.feasible(x)

    def satisfiesBounds(self,x):
        """Return true if x lies within the declared bounds of the space.
        Unlike feasible(), obstacles are not considered."""
        b = self.bounds()
        if b is None: return True
        for (xi,a,c) in zip(x,b[0],b[1]):
            if xi < a or xi > c:
                return False
        return True

    def bounds(self):
        return None

    def measure(self):
        return float('inf')

    def distance(self,a,b):
        """A distance metric. Default uses euclidean distance"""
        return euclideanMetric(a,b)


class CartesianConfigurationSpace(ConfigurationSpace):
    """The unbounded space R^d"""
    def __init__(self,d):
        self.d = d

    def __str__(self):
        return "Cartesian C-Space R^"+str(self.d)

    def dimension(self):
        return self.d


class BoxConfigurationSpace(ConfigurationSpace):
    """A subset of cartesian space in vector bounds [bmin,bmax].
    fills out the dimension, sample, and feasible methods"""
    def __init__(self,bmin,bmax):
        self.box = BoxSet(bmin,bmax)

    def __str__(self):
        return "Box C-Space "+str(self.box.bmin)+" to "+str(self.box.bmax)

    def dimension(self):
        return self.box.dimension()

    def bounds(self):
        return self.box.bounds()

    def measure(self):
        return self.box.measure()

    def sample(self,rng=random):
        return self.box.sample(rng)

    def feasible(self,x):
        return self.box.contains(x)

    def project(self,x):
        return self.box.project(x)


class SO2Space(ConfigurationSpace):
    """Space of angles [0,2pi) supporting proper wrapping"""
    def dimension(self):
        return 1
    def bounds(self):
        return [0],[math.pi*2]
    def measure(self):
        return math.pi*2
    def sample(self,rng=random):
        return [rng.uniform(0,math.pi*2)]
    def distance(self,a,b):
        return so2Metric(a,b)


class SO3Space(ConfigurationSpace):
    """Space of 3D rotations, represented as unit quaternions [w,x,y,z].

    Samples are uniform with respect to the Haar measure (Shoemake's
    method).  The measure of the space is pi^2.
    """
    def dimension(self):
        return 4
    def intrinsicDimension(self):
        return 3
    def bounds(self):
        return [-1.0]*4,[1.0]*4
    def measure(self):
        return math.pi*math.pi
    def sample(self,rng=random):
        u1,u2,u3 = rng.random(),rng.random(),rng.random()
        a = math.sqrt(1.0-u1)
        b = math.sqrt(u1)
        return [a*math.sin(2*math.pi*u2),a*math.cos(2*math.pi*u2),
                b*math.sin(2*math.pi*u3),b*math.cos(2*math.pi*u3)]
    def feasible(self,x):
        return abs(sum(v*v for v in x)-1.0) < 1e-6
    def distance(self,a,b):
        return so3Metric(a,b)


class MultiConfigurationSpace(MultiSet,ConfigurationSpace):
    """A cartesian product of multiple ConfigurationSpaces"""
    def __init__(self,*components):
        for c in components:
            if not isinstance(c,ConfigurationSpace):
                raise ValueError("Need to provide ConfigurationSpace objects to MultiConfigurationSpace")
        MultiSet.__init__(self,*components)
        self.componentWeights = [1]*len(self.components)

    def __str__(self):
        return "MultiConfigurationSpace("+','.join(str(s) for s in self.components)+")"

    def setDistanceWeights(self,weights):
        if len(weights) != len(self.componentWeights):
            raise ValueError("Need one distance weight per component, got "+str(len(weights)))
        self.componentWeights = list(weights)

    def intrinsicDimension(self):
        return sum(c.intrinsicDimension() for c in self.components)

    def feasible(self,x):
        for xi,c in zip(self.split(x),self.components):
            if not c.feasible(xi): return False
        return True

    def contains(self,x):
        return self.feasible(x)

    def satisfiesBounds(self,x):
        for xi,c in zip(self.split(x),self.components):
            if not c.satisfiesBounds(xi): return False
        return True

    def distance(self,a,b):
        res = 0.0
        for c,w,ai,bi in zip(self.components,self.componentWeights,self.split(a),self.split(b)):
            res += (c.distance(ai,bi)**2)*w
        return math.sqrt(res)


class SE2Space(MultiConfigurationSpace):
    """Planar rigid body poses [x,y,theta], with the translation restricted
    to the box [bmin,bmax]"""
    def __init__(self,bmin,bmax):
        if len(bmin) != 2:
            raise ValueError("SE2Space needs 2D translation bounds")
        MultiConfigurationSpace.__init__(self,BoxConfigurationSpace(bmin,bmax),SO2Space())
    def __str__(self):
        return "SE2Space("+str(self.components[0])+")"
    def setTranslationDistanceWeight(self,value):
        self.componentWeights[0] = value
    def setRotationDistanceWeight(self,value):
        self.componentWeights[1] = value


class SE3Space(MultiConfigurationSpace):
    """Spatial rigid body poses [x,y,z,qw,qx,qy,qz], with the translation
    restricted to the box [bmin,bmax]"""
    def __init__(self,bmin,bmax):
        if len(bmin) != 3:
            raise ValueError("SE3Space needs 3D translation bounds")
        MultiConfigurationSpace.__init__(self,BoxConfigurationSpace(bmin,bmax),SO3Space())
    def __str__(self):
        return "SE3Space("+str(self.components[0])+")"
    def setTranslationDistanceWeight(self,value):
        self.componentWeights[0] = value
    def setRotationDistanceWeight(self,value):
        self.componentWeights[1] = value


class SingletonSubset(Set):
    """A single point, with a distance given by a ConfigurationSpace.
    """
    def __init__(self,space,c):
        self.space = space
        self.c = list(c)

    def dimension(self):
        return len(self.c)

    def bounds(self):
        return (self.c,self.c)

    def measure(self):
        return 0.0

    def contains(self,x):
        return list(x) == self.c

    def sample(self,rng=random):
        return list(self.c)

    def project(self,x):
        return list(self.c)

    def signedDistance(self,x):
        return self.space.distance(x,self.c)


class NeighborhoodSubset(Set):
    """A ball of radius r around a point c, with a distance given by
    a ConfigurationSpace.
    """
    def __init__(self,space,c,r):
        self.space = space
        self.c = list(c)
        self.r = r

    def dimension(self):
        return len(self.c)

    def contains(self,x):
        return self.space.distance(x,self.c) <= self.r

    def signedDistance(self,x):
        d = self.space.distance(x,self.c)
        return d - self.r
