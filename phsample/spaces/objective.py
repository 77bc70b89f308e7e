import math
from .metric import euclideanMetric

class ObjectiveFunction:
    """Objective function base class.  Measures the cost of a trajectory
    [x0,...,xn],[u1,...,un] or a path [x0,...,xn].

    Costs are floats, lower is better, and a path that has not been found
    has infinite cost.
    """
    def incremental(self,x,u=None):
        return 0.0
    def terminal(self,x):
        return 0.0
    def cost(self,xpath,upath=None):
        c = 0.0
        if upath is None:
            for i in range(len(xpath)-1):
                c += self.incremental(xpath[i],xpath[i+1])
            return c+self.terminal(xpath[-1])
        assert len(xpath)==len(upath)+1
        for i in range(len(upath)):
            c += self.incremental(xpath[i],upath[i])
        return c + self.terminal(xpath[-1])
    def infiniteCost(self):
        return float('inf')
    def isFinite(self,c):
        return not math.isinf(c) and not math.isnan(c)
    def isCostBetterThan(self,a,b):
        return a < b
    def isCostEquivalentTo(self,a,b):
        return a == b

class PathLengthObjectiveFunction(ObjectiveFunction):
    """Length of a kinematic path; the control of each step is the next
    configuration."""
    def __init__(self,metric=euclideanMetric):
        self.metric = metric
    def incremental(self,x,u):
        return self.metric(x,u)
