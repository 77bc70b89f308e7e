import random


class Set:
    """Abstract base class for a set in a d-dimensional vector space.

    A set, at the minimum, has an inside-outside test.  It may be
    optionally bounded, measurable, and sample-able.
    """
    def __str__(self):
        return self.__class__.__name__

    def dimension(self):
        """Returns the number of entries of an element of this set"""
        try:
            x = self.sample()
            return len(x)
        except NotImplementedError:
            raise NotImplementedError("Set "+str(self)+" does not implement dimension()")

    def bounds(self):
        """Returns a pair (bmin,bmax) giving an axis-aligned bounding box
        on items in this set.  Return None if no bound can be determined."""
        raise NotImplementedError("Set "+str(self)+" does not implement bounds()")

    def measure(self):
        """Returns the Lebesgue measure (volume) of the set.  Unbounded
        sets return inf."""
        raise NotImplementedError("Set "+str(self)+" does not implement measure()")

    def sample(self,rng=random):
        """Sample a random value from the set.  rng is a random.Random
        instance (or the random module itself)."""
        raise NotImplementedError("Set "+str(self)+" does not implement sample()")

    def contains(self,x):
        """Returns True if x is in the set."""
        raise NotImplementedError("Set "+str(self)+" does not implement contains()")

    def project(self,x):
        """If x is not contained in the set, returns a nearby point in the
        set.  If is is contained, just returns x."""
        raise NotImplementedError("Set "+str(self)+" does not implement project()")


class BoxSet(Set):
    """Represents an axis-aligned box in a vector space."""
    def __init__(self,bmin,bmax):
        if len(bmin) != len(bmax):
            raise ValueError("BoxSet: bmin and bmax must have the same length")
        for (a,b) in zip(bmin,bmax):
            if b < a:
                raise ValueError("BoxSet: invalid bounds, "+str(b)+" < "+str(a))
        self.bmin = list(bmin)
        self.bmax = list(bmax)
    def __str__(self):
        return "BoxSet("+str(self.bmin)+","+str(self.bmax)+")"
    def dimension(self):
        return len(self.bmin)
    def bounds(self):
        return (self.bmin,self.bmax)
    def measure(self):
        res = 1.0
        for (a,b) in zip(self.bmin,self.bmax):
            res *= (b-a)
        return res
    def sample(self,rng=random):
        return [rng.uniform(a,b) for (a,b) in zip(self.bmin,self.bmax)]
    def contains(self,x):
        assert len(x)==len(self.bmin)
        for (xi,a,b) in zip(x,self.bmin,self.bmax):
            if xi < a or xi > b:
                return False
        return True
    def project(self,x):
        assert len(x)==len(self.bmin)
        xnew = list(x)
        for i,(xi,a,b) in enumerate(zip(x,self.bmin,self.bmax)):
            if xi < a:
                xnew[i] = a
            elif xi > b:
                xnew[i] = b
        return xnew


class MultiSet(Set):
    """A cartesian product of sets.  Elements are flat lists with the
    components laid out one after another."""
    def __init__(self,*components):
        self.components = components
    def __str__(self):
        return ' x '.join(str(c) for c in self.components)
    def dimension(self):
        return sum(c.dimension() for c in self.components)
    def bounds(self):
        cbounds = [c.bounds() for c in self.components]
        if any(c is None for c in cbounds): return None
        bmin,bmax = zip(*cbounds)
        return self.join(bmin),self.join(bmax)
    def measure(self):
        res = 1.0
        for c in self.components:
            res *= c.measure()
        return res
    def offsets(self):
        """Returns the list of (start,end) coordinate ranges occupied by each
        component"""
        i = 0
        res = []
        for c in self.components:
            d = c.dimension()
            res.append((i,i+d))
            i += d
        return res
    def split(self,x):
        return [list(x[a:b]) for (a,b) in self.offsets()]
    def join(self,xs):
        return sum((list(xi) for xi in xs),[])
    def contains(self,x):
        for (c,xi) in zip(self.components,self.split(x)):
            if not c.contains(xi):
                return False
        return True
    def sample(self,rng=random):
        return self.join(c.sample(rng) for c in self.components)
    def project(self,x):
        return self.join(c.project(xi) for c,xi in zip(self.components,self.split(x)))
