"""Direct informed sampling of prolate hyperspheroids for
asymptotically-optimal sampling-based motion planners."""

__version__ = '0.1.0'
