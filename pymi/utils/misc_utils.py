import numpy as np
import pytest


def as_sample_vector(values, name: str = "input_vector") -> np.ndarray:
    """converts a sequence of reals into a 1-D float64 numpy array

    Args:
        values: list/tuple/np.ndarray of real numbers
        name (str): name used in the error messages

    Raises:
        ValueError: if the input is not 1-D, or contains NaN/inf values

    Returns:
        np.ndarray: the samples as float64
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-D, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains NaN or infinite values")
    return arr


def print_int_vector(vector):
    """prints out the positive entries of an int vector. Mainly used for debugging"""
    for i, val in enumerate(vector):
        if val > 0:
            print(f"Val at i={i}, is {int(val)}")


def print_double_vector(vector):
    """prints out the positive entries of a double vector. Mainly used for debugging"""
    for i, val in enumerate(vector):
        if val > 0:
            print(f"Val at i={i}, is {float(val)}")


def test_as_sample_vector():
    arr = as_sample_vector([1, 2.5, -3])
    assert arr.dtype == np.float64
    assert arr.tolist() == [1.0, 2.5, -3.0]

    # empty input is allowed here, callers decide what to do with it
    assert as_sample_vector([]).size == 0

    with pytest.raises(ValueError):
        as_sample_vector([[1.0, 2.0], [3.0, 4.0]])

    for bad_value in [np.nan, np.inf, -np.inf]:
        with pytest.raises(ValueError):
            as_sample_vector([0.0, bad_value])


def test_print_vectors(capsys):
    print_int_vector([0, 3, -1, 2])
    assert capsys.readouterr().out == "Val at i=1, is 3\nVal at i=3, is 2\n"

    print_double_vector(np.array([0.5, 0.0, -2.0]))
    assert capsys.readouterr().out == "Val at i=0, is 0.5\n"
