"""
Utility functions useful for testing
"""

import numpy as np


def get_random_samples(size: int, low: float = -10.0, high: float = 10.0, seed: int = None):
    """generates i.i.d uniform real samples in [low, high)

    Args:
        size (int): number of samples
        low (float): lower end of the sample range
        high (float): upper end of the sample range
        seed (int): random seed used to generate the data
    """
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=size)


def get_random_integer_samples(size: int, num_levels: int, seed: int = None):
    """generates i.i.d samples uniform over the integer levels 0..num_levels-1, as floats

    Useful when the discretized states need to be known in advance.
    """
    rng = np.random.default_rng(seed)
    return rng.integers(0, num_levels, size=size).astype(np.float64)
