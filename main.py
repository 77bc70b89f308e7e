from phsample.spaces.configurationspace import *
from phsample.spaces.objective import PathLengthObjectiveFunction
from phsample.spaces.informedsampler import PathLengthDirectInfSampler
from phsample.planners.problem import PlanningProblem
from phsample.planners.helpers import infty
import math
import sys

numSamples = 1000

def ellipseScenario():
    space = BoxConfigurationSpace([-100,-100],[100,100])
    return PlanningProblem(space,start=[0,0],goal=[10,0],objective=PathLengthObjectiveFunction()),20.0

def degenerateScenario():
    space = BoxConfigurationSpace([-100,-100],[100,100])
    return PlanningProblem(space,start=[0,0],goal=[10,0],objective=PathLengthObjectiveFunction()),10.0000001

def boundedScenario():
    space = BoxConfigurationSpace([0,-100],[4,100])
    return PlanningProblem(space,start=[0,0],goal=[10,0],objective=PathLengthObjectiveFunction()),20.0

def uniformScenario():
    space = BoxConfigurationSpace([0,0],[4,4])
    return PlanningProblem(space,start=[0,0],goal=[10,0],objective=PathLengthObjectiveFunction()),infty

def se2Scenario():
    space = SE2Space([-20,-20],[20,20])
    return PlanningProblem(space,start=[0,0,0],goal=[10,0,math.pi],objective=PathLengthObjectiveFunction()),12.0

all_scenarios = {'ellipse':ellipseScenario,
                 'degenerate':degenerateScenario,
                 'bounded':boundedScenario,
                 'uniform':uniformScenario,
                 'se2':se2Scenario}

def runScenario(name,n,seed=0):
    """Draws n samples for the named scenario.  Returns the sampler, the
    cost bound, and the accepted samples."""
    problem,maxCost = all_scenarios[name]()
    sampler = PathLengthDirectInfSampler(problem,maxNumberCalls=100,seed=seed)
    samples = []
    timer = sampler.stats.stopwatch('sampleTime')
    for i in range(n):
        x = [0.0]*problem.space.dimension()
        timer.begin()
        res = sampler.sampleUniform(x,maxCost)
        timer.end()
        if res:
            samples.append(x)
    costs = sampler.stats.value('heuristicCost')
    for x in samples:
        costs.add(sampler.heuristicSolnCost(x))
    print("Scenario",name,"on",problem.space,"with cost bound",maxCost)
    print("  Accepted",len(samples),"of",n,"samples")
    print("  Informed measure",sampler.getInformedMeasure(maxCost),"of",problem.space.measure())
    print("Stats:")
    sampler.stats.pretty_print(1)
    print()
    return sampler,maxCost,samples

def plotSamples(sampler,maxCost,samples,name):
    import matplotlib.pyplot as plt
    xs = [x[0] for x in samples]
    ys = [x[1] for x in samples]
    plt.scatter(xs,ys,s=2)
    (f1,f2) = sampler.getFoci()
    if not math.isinf(maxCost):
        c = sampler.phs.getCentre()
        a = 0.5*maxCost
        b = 0.5*math.sqrt(maxCost**2-sampler.getMinPossibleCost()**2)
        R = sampler.phs.getRotation()
        pts = []
        for i in range(201):
            u = float(i)/200*math.pi*2
            p = [a*math.cos(u),b*math.sin(u)]
            pts.append([c[0]+R[0][0]*p[0]+R[0][1]*p[1],c[1]+R[1][0]*p[0]+R[1][1]*p[1]])
        plt.plot([p[0] for p in pts],[p[1] for p in pts],'r-')
    plt.plot([f1[0],f2[0]],[f1[1],f2[1]],'ko')
    plt.axis('equal')
    plt.title(name)
    plt.show()

if __name__=="__main__":
    if len(sys.argv) < 2:
        print("Usage: main.py [-v] Scenario [numSamples]")
        print()
        print("  Scenario can be one of:")
        print("   ",",\n    ".join(sorted(all_scenarios)))
        print("  or 'all' to run all scenarios.")
        print()
        print("  If -v is provided, plots the samples with matplotlib")
        exit(0)
    args = sys.argv[1:]
    visualize = False
    if args[0] == '-v':
        visualize = True
        args = args[1:]
    if len(args) >= 2:
        numSamples = int(args[1])
    if args[0] == 'all':
        names = sorted(all_scenarios)
    else:
        names = [args[0]]
    for name in names:
        if name not in all_scenarios:
            print("Unknown scenario",name)
            exit(1)
        sampler,maxCost,samples = runScenario(name,numSamples)
        if visualize:
            plotSamples(sampler,maxCost,samples,name)
