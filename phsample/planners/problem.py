from ..spaces.configurationspace import *

class PlanningProblem:
    """A planning problem: a configuration space, start(s), a goal, and an
    optimization objective.

    start is a single configuration; several start configurations may be
    given with starts instead.  goal may be a configuration, a
    SingletonSubset, or any other Set.  If goalRadius is given, a
    configuration goal is turned into a NeighborhoodSubset of that radius.
    """
    def __init__(self,space,
                 start=None,
                 goal=None,
                 objective=None,
                 goalRadius=None,
                 starts=None):
        if start is not None and starts is not None:
            raise ValueError("PlanningProblem: provide either start or starts, not both")
        self.space = space
        self.configurationSpace = space
        if goalRadius is not None and isinstance(goal,(list,tuple)):
            goal = NeighborhoodSubset(self.configurationSpace,goal,goalRadius)
        if starts is not None:
            self.starts = [list(s) for s in starts]
        elif start is not None:
            self.starts = [list(start)]
        else:
            self.starts = []
        self.goal = goal
        self.objective = objective

    @property
    def start(self):
        if len(self.starts) == 1:
            return self.starts[0]
        return None

    def startStates(self):
        return self.starts

    def hasOptimizationObjective(self):
        return self.objective is not None

    def pointToPoint(self):
        return self.goalState() is not None

    def goalState(self):
        """Returns the goal configuration if the goal is a single point,
        otherwise None"""
        if isinstance(self.goal,SingletonSubset):
            return self.goal.c
        if isinstance(self.goal,(list,tuple)):
            if len(self.goal) > 0 and isinstance(self.goal[0],(list,tuple)):
                #a list of goal configurations
                return None
            return list(self.goal)
        return None
