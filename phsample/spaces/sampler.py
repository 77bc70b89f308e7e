import random

class Sampler:
    """A base class for a sampling routine.  Samples the space uniformly
    within its declared bounds, using the generator rng."""
    def __init__(self,space,rng=random):
        self.space = space
        self.rng = rng
    def sample(self):
        return self.space.sample(self.rng)
    def sampleUniform(self,x):
        """Overwrites the configuration x with a uniform sample"""
        x[:] = self.sample()
        return True
