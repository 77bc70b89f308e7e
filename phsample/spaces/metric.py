import math
import numpy as np

def euclideanMetric(a,b):
    return float(np.linalg.norm(np.asarray(a,dtype=float)-np.asarray(b,dtype=float)))

def so2Metric(a,b):
    """Distance between two angles with wrapping"""
    d = math.fmod(abs(a[0]-b[0]),math.pi*2)
    return min(d,math.pi*2-d)

def so3Metric(a,b):
    """Rotation angle between two unit quaternions"""
    dq = abs(float(np.dot(a,b)))
    return 2.0*math.acos(min(1.0,dq))
