"""Marginal probabilities of a discretized random variable

ProbabilityState takes a data vector, discretizes it with normalize_array, and computes
the empirical probability count / N of each state. It is the base for all the estimators
of one variable (entropy etc.), and merge_arrays can be used to get the joint state of
two variables which can then be passed to ProbabilityState as well.

Only the observed states are stored (sparse counts), so max_state, the size of the
contiguous state range, can be larger than the number of entries in prob_dict.
"""

import argparse
import logging
import types
import unittest

import numpy as np

from pymi.core.discretizer import normalize_array
from pymi.core.joint_state import merge_arrays
from pymi.core.prob_dist import Frequencies, ProbabilityDist
from pymi.utils.misc_utils import print_int_vector
from pymi.utils.test_utils import get_random_samples

logger = logging.getLogger(__name__)


class ProbabilityState:
    """probability of each state in a data vector

    The state probabilities are computed once in the constructor. prob_dict is a
    read-only view, so the object can be shared across threads after construction.
    """

    def __init__(self, data_vector):
        """
        Args:
            data_vector: 1-D sequence of real numbers, discretized with normalize_array

        Raises:
            ValueError: if data_vector is empty, not 1-D, or contains NaN/inf
        """
        normalized_vector, self._max_state = normalize_array(data_vector)
        if normalized_vector.size == 0:
            raise ValueError("cannot compute the probability of an empty data vector")

        freqs = Frequencies.from_states(normalized_vector)
        self._prob_dist = freqs.get_prob_dist()
        self._prob_dict = types.MappingProxyType(self._prob_dist.prob_dict)

        logger.debug(
            "computed probabilities of %d observed states out of %d",
            len(self._prob_dict),
            self._max_state,
        )

    def __repr__(self):
        return f"ProbabilityState(max_state={self._max_state}, prob_dict={dict(self._prob_dict)})"

    @property
    def prob_dict(self):
        """mapping state -> probability, for the observed states only"""
        return self._prob_dict

    @property
    def probabilities(self):
        return self._prob_dict

    @property
    def max_state(self) -> int:
        """number of states in the contiguous range [0, max], observed or not"""
        return self._max_state

    @property
    def state_count(self) -> int:
        return self._max_state

    @property
    def prob_dist(self) -> ProbabilityDist:
        return self._prob_dist

    def probability(self, state: int) -> float:
        """probability of the state, 0.0 for states in the range which were never observed

        Raises:
            KeyError: if the state is outside [0, max_state)
        """
        if not 0 <= state < self._max_state:
            raise KeyError(f"state {state} not in [0, {self._max_state})")
        return self._prob_dict.get(state, 0.0)


######################################## TESTS ##########################################


class ProbabilityStateTest(unittest.TestCase):
    def test_probability_state_example(self):
        prob_state = ProbabilityState([1.0, 1.0, 2.0])
        assert prob_state.state_count == 2
        assert prob_state.max_state == 2
        assert set(prob_state.probabilities) == {0, 1}
        np.testing.assert_allclose(prob_state.probability(0), 2 / 3)
        np.testing.assert_allclose(prob_state.probability(1), 1 / 3)

    def test_sparse_states(self):
        """max_state counts the whole range, prob_dict only the observed states"""
        prob_state = ProbabilityState([0.0, 100.0, 100.0, 0.0])
        assert prob_state.max_state == 101
        assert dict(prob_state.prob_dict) == {0: 0.5, 100: 0.5}
        assert prob_state.probability(50) == 0.0

        with self.assertRaises(KeyError):
            prob_state.probability(101)

    def test_single_state(self):
        prob_state = ProbabilityState([-2.2] * 7)
        assert prob_state.max_state == 1
        assert dict(prob_state.prob_dict) == {0: 1.0}

    def test_prob_dict_is_read_only(self):
        prob_state = ProbabilityState([1.0, 2.0])
        with self.assertRaises(TypeError):
            prob_state.prob_dict[0] = 1.0

    def test_invalid_inputs(self):
        for bad_input in [[], [np.nan, 1.0], [1.0, -np.inf], [[1.0], [2.0]]]:
            with self.assertRaises(ValueError):
                ProbabilityState(bad_input)

    def test_probabilities_sum_to_one(self):
        for seed in range(10):
            samples = get_random_samples(size=1000, low=-50.0, high=50.0, seed=seed)
            prob_state = ProbabilityState(samples)

            np.testing.assert_allclose(sum(prob_state.probabilities.values()), 1.0)
            assert all(0 < p <= 1 for p in prob_state.probabilities.values())
            assert len(prob_state.prob_dict) <= prob_state.max_state
            assert min(prob_state.prob_dict) == 0

    def test_joint_probability_state(self):
        """the joint state from merge_arrays can be passed on to ProbabilityState"""
        joint_states, _ = merge_arrays([0, 0, 1, 1], [0, 1, 1, 1])
        prob_state = ProbabilityState(joint_states)
        assert dict(prob_state.prob_dict) == {0: 0.25, 1: 0.25, 2: 0.5}


if __name__ == "__main__":
    # Provide a simple CLI interface below for convenient experimentation
    parser = argparse.ArgumentParser()
    parser.add_argument("-i", "--input", help="file with whitespace separated samples", required=True, type=str)
    parser.add_argument("-m", "--merge", help="second file, prints the joint state instead", type=str)
    parser.add_argument("-v", "--verbose", help="print debug logs", action="store_true")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    data_vector = np.loadtxt(args.input, dtype=np.float64, ndmin=1).ravel()

    if args.merge is not None:
        second_vector = np.loadtxt(args.merge, dtype=np.float64, ndmin=1).ravel()
        joint_states, state_count = merge_arrays(data_vector, second_vector)
        print_int_vector(joint_states)
        print("state count:", state_count)
    else:
        normalized_vector, state_count = normalize_array(data_vector)
        print_int_vector(normalized_vector)
        prob_state = ProbabilityState(data_vector)
        print("state count:", prob_state.max_state)
        for state, prob in prob_state.prob_dict.items():
            print(f"P({state}) = {prob:.6f}")
