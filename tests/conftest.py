import pytest
from phsample.spaces.configurationspace import BoxConfigurationSpace
from phsample.spaces.objective import PathLengthObjectiveFunction
from phsample.planners.problem import PlanningProblem


@pytest.fixture
def makeProblem():
    """Returns a function building a path-length problem on a space"""
    def make(space,start=(0,0),goal=(10,0),**kwargs):
        return PlanningProblem(space,start=list(start),goal=list(goal),objective=PathLengthObjectiveFunction(),**kwargs)
    return make


@pytest.fixture
def wideProblem(makeProblem):
    return makeProblem(BoxConfigurationSpace([-100,-100],[100,100]))
