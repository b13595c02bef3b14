"""Discretization of real-valued sample vectors

Every sample is rounded to an integer, and the rounded vector is shifted so that its
minimum is 0. The state count returned is the size of the contiguous range of states
[0, max], i.e. max - min + 1 of the rounded values. Integers in that range which never
occur in the data are still counted.

Rounding follows the convention of Hanchuan Peng's MutualInfo 0.9 MATLAB toolbox:
adding 0.5 and truncating rounds both int(-1 + 0.5) and int(1 - 0.5) towards 0, so the
0.5 adjustment is applied differently depending on the sign:
- v > 0  -> floor(v + 0.5)
- v <= 0 -> ceil(v - 0.5)

so that -1.0 -> -1, -0.5 -> -1, 0.0 -> 0, 0.5 -> 1 and 1.0 -> 1.
Downstream estimates depend on this rule, so it should not be replaced with np.round.
"""

import logging
from typing import Tuple

import numpy as np

from pymi.utils.misc_utils import as_sample_vector
from pymi.utils.test_utils import get_random_samples

logger = logging.getLogger(__name__)


def round_samples(input_vector) -> np.ndarray:
    """rounds the samples to integers using the sign dependent 0.5 adjustment

    Args:
        input_vector: 1-D sequence of real numbers

    Returns:
        np.ndarray: rounded values (int64), same length as the input
    """
    samples = as_sample_vector(input_vector)
    rounded = np.where(samples > 0, np.floor(samples + 0.5), np.ceil(samples - 0.5))
    return rounded.astype(np.int64)


def normalize_array(input_vector) -> Tuple[np.ndarray, int]:
    """converts the input into a zero-based integer state vector

    A normalized array has min value = 0, max value = old max value - old min value,
    and all values are integers.

    Args:
        input_vector: 1-D sequence of real numbers

    Raises:
        ValueError: if the input is not 1-D or contains NaN/inf

    Returns:
        Tuple[np.ndarray, int]: the state vector, and the state count (0 for empty input)
    """
    rounded = round_samples(input_vector)
    if rounded.size == 0:
        return rounded, 0

    min_val = int(rounded.min())
    max_val = int(rounded.max())
    output_vector = rounded - min_val
    state_count = (max_val - min_val) + 1

    logger.debug("normalized %d samples into %d states", rounded.size, state_count)
    return output_vector, state_count


######################################## TESTS ##########################################


def test_rounding_convention():
    """checks the sign dependent rounding, including the boundaries at +-0.5 and 0"""
    test_cases = [
        (-1.0, -1),
        (1.0, 1),
        (-0.5, -1),
        (0.5, 1),
        (0.0, 0),
        (-0.49, 0),
        (0.49, 0),
        (1.5, 2),
        (-1.5, -2),
        (2.4999, 2),
        (-2.5001, -3),
    ]
    for value, expected in test_cases:
        assert round_samples([value]).tolist() == [expected], f"failed for {value}"


def test_normalize_array_examples():
    output_vector, state_count = normalize_array([1.0, 2.0, 3.0])
    assert output_vector.tolist() == [0, 1, 2]
    assert state_count == 3

    output_vector, state_count = normalize_array([-1.0, 0.0, 1.0, 1.0])
    assert output_vector.tolist() == [0, 1, 2, 2]
    assert state_count == 3

    # the state count covers the whole range, even the unobserved state 1
    output_vector, state_count = normalize_array([0.0, 2.0])
    assert output_vector.tolist() == [0, 2]
    assert state_count == 3


def test_normalize_array_edge_cases():
    output_vector, state_count = normalize_array([])
    assert output_vector.size == 0
    assert state_count == 0

    output_vector, state_count = normalize_array([4.2] * 5)
    assert output_vector.tolist() == [0] * 5
    assert state_count == 1

    # input is not modified
    data = np.array([-3.7, 1.2, 8.9])
    normalize_array(data)
    assert data.tolist() == [-3.7, 1.2, 8.9]


def test_normalize_array_invalid_inputs():
    for bad_input in [[1.0, np.nan], [np.inf], np.zeros((2, 2))]:
        try:
            normalize_array(bad_input)
        except ValueError:
            continue
        raise AssertionError(f"expected ValueError for {bad_input}")


def test_normalize_array_random():
    """min state is 0, and state count is max - min + 1 of the rounded values"""
    for seed in range(10):
        samples = get_random_samples(size=500, low=-20.0, high=20.0, seed=seed)
        output_vector, state_count = normalize_array(samples)
        rounded = round_samples(samples)

        assert output_vector.size == samples.size
        assert output_vector.min() == 0
        assert state_count == rounded.max() - rounded.min() + 1
        assert state_count >= 1
        assert np.all(output_vector < state_count)
