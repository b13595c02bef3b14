"""Joint state of two sample vectors

Both vectors are discretized independently (see discretizer.py), and every pair
(first_state, second_state) is mapped to the index

    first_state + second_state * first_num_states

in a lookup table of size first_num_states * second_num_states. The first time an index
is seen it gets the next label (labels start from 1), so equal pairs always get equal
labels, and labels are handed out in the order in which the pairs first appear.

The returned state count is the final value of the label counter, which starts at 1.
It is therefore 1 + the number of distinct pairs, and not the number of distinct labels.
Callers computing joint entropies rely on this value, so it is kept as is.
"""

import logging
from typing import Tuple

import numpy as np

from pymi.core.discretizer import normalize_array
from pymi.utils.misc_utils import as_sample_vector
from pymi.utils.test_utils import get_random_integer_samples, get_random_samples

logger = logging.getLogger(__name__)


def merge_arrays(first_vector, second_vector) -> Tuple[np.ndarray, int]:
    """computes the joint state of two vectors

    Args:
        first_vector: 1-D sequence of real numbers
        second_vector: 1-D sequence of real numbers, same length as first_vector

    Raises:
        ValueError: if the lengths differ, or the inputs are not 1-D / contain NaN or inf

    Returns:
        Tuple[np.ndarray, int]: the joint state vector (labels >= 1), and the final label counter
    """
    first_vector = as_sample_vector(first_vector, name="first_vector")
    second_vector = as_sample_vector(second_vector, name="second_vector")
    if first_vector.size != second_vector.size:
        raise ValueError(
            f"vectors must have the same length, got {first_vector.size} and {second_vector.size}"
        )

    first_states, first_num_states = normalize_array(first_vector)
    second_states, second_num_states = normalize_array(second_vector)

    # 0 -> pair not seen yet
    state_map = np.zeros(first_num_states * second_num_states, dtype=np.int64)
    output_vector = np.zeros(first_vector.size, dtype=np.int64)

    state_count = 1
    pair_indices = first_states + second_states * first_num_states
    for i, cur_index in enumerate(pair_indices):
        if state_map[cur_index] == 0:
            state_map[cur_index] = state_count
            state_count += 1
        output_vector[i] = state_map[cur_index]

    logger.debug(
        "merged %d samples (%d x %d states) into %d joint states",
        first_vector.size,
        first_num_states,
        second_num_states,
        state_count - 1,
    )
    return output_vector, state_count


######################################## TESTS ##########################################


def test_merge_arrays_example():
    output_vector, state_count = merge_arrays([0, 0, 1, 1], [0, 1, 0, 1])
    # pair indices are 0, 2, 1, 3 -> labelled in the order they are seen
    assert output_vector.tolist() == [1, 2, 3, 4]
    assert state_count == 5


def test_merge_arrays_repeated_pairs():
    output_vector, state_count = merge_arrays([1.0, 2.0, 1.0, 2.0, 1.0], [5.0, 5.0, 5.0, 7.0, 5.0])
    assert output_vector.tolist() == [1, 2, 1, 3, 1]
    assert state_count == 4

    # a vector merged with itself has the same number of joint states as it has pairs
    output_vector, state_count = merge_arrays([3.0, -3.0, 3.0], [3.0, -3.0, 3.0])
    assert output_vector.tolist() == [1, 2, 1]
    assert state_count == 3


def test_merge_arrays_edge_cases():
    output_vector, state_count = merge_arrays([], [])
    assert output_vector.size == 0
    assert state_count == 1

    output_vector, state_count = merge_arrays([0.3], [-7.2])
    assert output_vector.tolist() == [1]
    assert state_count == 2


def test_merge_arrays_invalid_inputs():
    invalid_inputs = [
        ([1.0, 2.0, 3.0], [1.0, 2.0]),
        ([1.0], []),
        ([1.0, np.nan], [1.0, 2.0]),
        ([1.0, 2.0], [np.inf, 2.0]),
    ]
    for first_vector, second_vector in invalid_inputs:
        try:
            merge_arrays(first_vector, second_vector)
        except ValueError:
            continue
        raise AssertionError(f"expected ValueError for {first_vector}, {second_vector}")


def test_merge_arrays_random():
    """labels are deterministic, and equal labels <=> equal pairs of states"""
    for seed in range(5):
        first_vector = get_random_samples(size=300, low=-5.0, high=5.0, seed=seed)
        second_vector = get_random_integer_samples(size=300, num_levels=4, seed=seed + 100)

        output_vector, state_count = merge_arrays(first_vector, second_vector)
        output_vector_2, state_count_2 = merge_arrays(first_vector, second_vector)
        assert np.array_equal(output_vector, output_vector_2)
        assert state_count == state_count_2

        first_states, _ = normalize_array(first_vector)
        second_states, _ = normalize_array(second_vector)
        pairs = list(zip(first_states.tolist(), second_states.tolist()))

        label_of_pair = {}
        for pair, label in zip(pairs, output_vector.tolist()):
            # labels are handed out 1, 2, 3, ... in order of first appearance
            if pair not in label_of_pair:
                assert label == len(label_of_pair) + 1
                label_of_pair[pair] = label
            assert label_of_pair[pair] == label

        assert len(set(label_of_pair.values())) == len(label_of_pair)
        assert state_count == len(label_of_pair) + 1
