import math
import random
from .configurationspace import *
from .sampler import Sampler
from .sampling import sample_unit_ball
from .prolatehyperspheroid import ProlateHyperspheroid
from ..planners.helpers import popdefault
from ..planners.profiler import Profiler,CountProfiler


class InformedSampler:
    """Base class for samplers that only generate configurations that could
    improve a solution of a given cost.

    Each sampling call spends at most maxNumberCalls iterations.  Running
    out of iterations is reported by returning False.

    Parameters:
    - seed: seeds the sampler's own random.Random generator
    - rng: a generator to use instead (anything with random(), uniform(),
      and gauss() methods)
    """
    def __init__(self,problem,maxNumberCalls,**params):
        if not problem.hasOptimizationObjective():
            raise ValueError("There is no optimization objective")
        if maxNumberCalls <= 0:
            raise ValueError("maxNumberCalls must be positive")
        self.problem = problem
        self.space = problem.configurationSpace
        self.objective = problem.objective
        self.maxNumberCalls = maxNumberCalls
        seed = popdefault(params,'seed',None,False)
        self.rng = popdefault(params,'rng',None,False)
        if self.rng is None:
            self.rng = random.Random(seed)
        if len(params) != 0:
            print("Warning, unused params",params)
        self.stats = Profiler()

    def sampleUniform(self,x,*costs):
        """Called as sampleUniform(x,maxCost) or
        sampleUniform(x,minCost,maxCost).  Overwrites the configuration x
        with a sample whose heuristic solution cost is less than maxCost
        (and at least minCost).  Returns True on success."""
        raise NotImplementedError()

    def _costBounds(self,costs):
        """Splits (maxCost,) or (minCost,maxCost) into minCost,maxCost, with
        minCost None if not given"""
        if len(costs) == 1:
            return None,costs[0]
        if len(costs) == 2:
            return costs[0],costs[1]
        raise TypeError("Expected (maxCost) or (minCost,maxCost), got "+str(len(costs))+" costs")

    def hasInformedMeasure(self):
        raise NotImplementedError()

    def getInformedMeasure(self,currentCost):
        raise NotImplementedError()

    def heuristicSolnCost(self,x):
        raise NotImplementedError()

    def getMinPossibleCost(self):
        raise NotImplementedError()

    def getProblem(self):
        return self.problem

    def getMaxNumberCalls(self):
        return self.maxNumberCalls


class PathLengthDirectInfSampler(InformedSampler):
    """An informed sampler for problems seeking to minimize path length.

    The configurations that can improve a solution of cost c form a prolate
    hyperspheroid (PHS) with the start and goal as foci and transverse
    diameter c.  The PHS is sampled directly by mapping uniform samples of
    the unit ball, so no samples are wasted on configurations that cannot
    improve the solution, regardless of the dimension of the space or how
    close c is to the theoretical minimum.

    Supports R^n (CartesianConfigurationSpace, BoxConfigurationSpace) and
    the translational part of SE2Space and SE3Space, with a single start and
    a single goal configuration.  The rotational part of SE(2) and SE(3) is
    sampled uniformly.

    Until a solution is found (infinite cost), or if the PHS is not smaller
    than the space, this passes through to uniform sampling of the whole
    space.  Samples from the PHS that violate the bounds of the space are
    rejected.

    Reference: J. D. Gammell, S. S. Srinivasa, T. D. Barfoot, "Informed RRT*:
    Optimal Sampling-based Path Planning Focused via Direct Sampling of an
    Admissible Ellipsoidal Heuristic." IROS 2014.
    """
    def __init__(self,problem,maxNumberCalls=100,**params):
        InformedSampler.__init__(self,problem,maxNumberCalls,**params)
        space = self.space
        if isinstance(space,(SE2Space,SE3Space)):
            self.informedSubspace = space.components[0]
            self.uninformedSubspace = space.components[1]
            (a,b),(c,d) = space.offsets()
            self.informedIndices = list(range(a,b))
            self.uninformedIndices = list(range(c,d))
        elif isinstance(space,(CartesianConfigurationSpace,BoxConfigurationSpace)):
            self.informedSubspace = space
            self.uninformedSubspace = None
            self.informedIndices = list(range(space.dimension()))
            self.uninformedIndices = []
        else:
            raise ValueError("PathLengthDirectInfSampler only supports R^n, SE(2), and SE(3) spaces, not "+str(space))

        starts = problem.startStates()
        if len(starts) != 1:
            raise ValueError("PathLengthDirectInfSampler only supports 1 start configuration, got "+str(len(starts)))
        goal = problem.goalState()
        if goal is None:
            raise ValueError("PathLengthDirectInfSampler only supports a single goal configuration")
        d = space.dimension()
        if len(starts[0]) != d or len(goal) != d:
            raise ValueError("Start and goal must be configurations of dimension "+str(d))

        #an unbounded space has no uniform distribution to pass through to
        self.canSampleSpace = not math.isinf(space.measure())
        self.baseSampler = Sampler(space,self.rng)
        if self.uninformedSubspace is not None:
            self.uninformedSubSampler = Sampler(self.uninformedSubspace,self.rng)
        else:
            self.uninformedSubSampler = None
        self.phs = ProlateHyperspheroid(len(self.informedIndices),self.project(starts[0]),self.project(goal))

        self.numIters = self.stats.count('numIters')
        self.numBoundsRejections = self.stats.count('numBoundsRejections')
        self.numCostRejections = self.stats.count('numCostRejections')
        self.numUniformFallbacks = self.stats.count('numUniformFallbacks')
        self.numFailures = self.stats.count('numFailures')

    def project(self,x):
        """Returns the informed (translational) part of x"""
        return [x[i] for i in self.informedIndices]

    def getFoci(self):
        return self.phs.getFoci()

    def getMinPossibleCost(self):
        return self.phs.getMinTransverseDiameter()

    def sampleUniform(self,x,*costs):
        """Called as sampleUniform(x,maxCost) or
        sampleUniform(x,minCost,maxCost).  Overwrites x with a sample whose
        heuristic solution cost lies in [minCost,maxCost), or below maxCost
        if no minCost is given.

        Bounds rejections and cost rejections share one budget of
        maxNumberCalls iterations.  Returns False when the budget is
        exhausted, in which case x holds the last rejected candidate.
        """
        minCost,maxCost = self._costBounds(costs)
        iters = CountProfiler()
        if minCost is None:
            res = self._sampleUniform(x,maxCost,iters)
        else:
            res = False
            if self.objective.isCostBetterThan(minCost,maxCost):
                while not res and iters.count < self.maxNumberCalls:
                    res = self._sampleUniform(x,maxCost,iters)
                    if res and self.objective.isCostBetterThan(self.heuristicSolnCost(x),minCost):
                        self.numCostRejections += 1
                        res = False
        if not res:
            self.numFailures += 1
        return res

    def hasInformedMeasure(self):
        return True

    def getInformedMeasure(self,currentCost):
        """The measure of the subset of the space that can improve a solution
        of cost currentCost, never more than the measure of the space.  The
        bounds of the space are not otherwise considered.  If there is no
        solution, this is the measure of the whole space."""
        if not self.objective.isFinite(currentCost):
            return self.space.measure()
        if self.objective.isCostBetterThan(currentCost,self.phs.getMinTransverseDiameter()):
            return 0.0
        informedMeasure = self.phs.getPhsMeasure(currentCost)
        if self.uninformedSubspace is not None:
            informedMeasure *= self.uninformedSubspace.measure()
        return min(self.space.measure(),informedMeasure)

    def heuristicSolnCost(self,x):
        """Length of the straight-line path start -> x -> goal through the
        informed part of x"""
        return self.phs.getPathLength(self.project(x))

    def sampleUniformIgnoreBounds(self,x,*costs):
        """Called as sampleUniformIgnoreBounds(x,maxCost) or
        sampleUniformIgnoreBounds(x,minCost,maxCost).  Overwrites x with a
        sample of the PHS for maxCost, ignoring the bounds of the space.

        With a minCost, samples cheaper than minCost are rejected, up to
        maxNumberCalls times.  Returns True on success.
        """
        minCost,maxCost = self._costBounds(costs)
        if minCost is not None and not self.objective.isCostBetterThan(minCost,maxCost):
            self.numFailures += 1
            return False
        self.phs.setTransverseDiameter(maxCost)
        for i in range(self.maxNumberCalls):
            self.numIters += 1
            self._samplePhs(x)
            if minCost is None or not self.objective.isCostBetterThan(self.heuristicSolnCost(x),minCost):
                return True
            self.numCostRejections += 1
        self.numFailures += 1
        return False

    def _samplePhs(self,x):
        sphere = sample_unit_ball(self.phs.getPhsDimension(),self.rng)
        informed = self.phs.transform(sphere)
        if self.uninformedSubSampler is None:
            x[:] = informed
            return
        res = [0.0]*(len(self.informedIndices)+len(self.uninformedIndices))
        for i,v in zip(self.informedIndices,informed):
            res[i] = v
        for i,v in zip(self.uninformedIndices,self.uninformedSubSampler.sample()):
            res[i] = v
        x[:] = res

    def _sampleUniform(self,x,maxCost,iters):
        """Samples below maxCost, advancing the shared iteration counter
        iters."""
        if not self.objective.isFinite(maxCost):
            #no solution yet, the informed subset is the whole space
            iters += 1
            self.numIters += 1
            if not self.canSampleSpace:
                iters.set(max(iters.count,self.maxNumberCalls))
                return False
            self.baseSampler.sampleUniform(x)
            return True

        if self.objective.isCostBetterThan(maxCost,self.phs.getMinTransverseDiameter()):
            #no configuration can be this cheap
            iters.set(max(iters.count,self.maxNumberCalls))
            return False

        self.phs.setTransverseDiameter(maxCost)
        samplePhs = self.phs.getPhsMeasure() < self.informedSubspace.measure()
        while iters.count < self.maxNumberCalls:
            iters += 1
            self.numIters += 1
            if samplePhs:
                self._samplePhs(x)
                if not self.space.satisfiesBounds(x):
                    self.numBoundsRejections += 1
                    continue
            else:
                #the PHS is larger than the space, so the whole space is
                #cheaper to sample
                self.numUniformFallbacks += 1
                self.baseSampler.sampleUniform(x)
            if not self.objective.isCostBetterThan(self.heuristicSolnCost(x),maxCost):
                self.numCostRejections += 1
                continue
            return True
        return False


class InformedConfigurationSampler(Sampler):
    """Adapts an InformedSampler to the plain Sampler interface used by the
    planners.  costFn() gives the cost of the current best solution (inf if
    there is none) each time a sample is requested.

    If the informed sampler exhausts its budget, a uniform sample of the
    whole space is returned instead, or None if the space is unbounded.
    """
    def __init__(self,infSampler,costFn):
        Sampler.__init__(self,infSampler.space,infSampler.rng)
        self.infSampler = infSampler
        self.costFn = costFn
        self.numFallbacks = infSampler.stats.count('numPlannerFallbacks')
    def sample(self):
        x = [0.0]*self.space.dimension()
        if self.infSampler.sampleUniform(x,self.costFn()):
            return x
        self.numFallbacks += 1
        if math.isinf(self.space.measure()):
            return None
        return self.space.sample(self.rng)
