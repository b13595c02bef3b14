import unittest

import numpy as np

# allowed deviation of the sum of probabilities from 1
PROB_SUM_TOLERANCE = 1e-8


class ProbabilityDist:
    """
    Wrapper around a probability dict
    """

    def __init__(self, prob_dict=None):
        self._validate_prob_dist(prob_dict)

        # NOTE: We use the fact that since python 3.6, dictionaries in python are
        # also OrderedDicts. https://realpython.com/python-ordereddict/
        self.prob_dict = prob_dict

    def __repr__(self):
        return f"ProbabilityDist({self.prob_dict.__repr__()})"

    @property
    def size(self):
        return len(self.prob_dict)

    @property
    def alphabet(self):
        return list(self.prob_dict)

    @property
    def prob_list(self):
        return [self.prob_dict[s] for s in self.alphabet]

    @classmethod
    def normalize_prob_dict(cls, prob_dict):
        """
        normalizes dict -> dict_norm so that the sum of values is 1
        wraps dict_norm as a ProbabilityDist
        """
        sum_p = sum(prob_dict.values())
        return cls({a: b / sum_p for a, b in prob_dict.items()})

    def probability(self, symbol):
        return self.prob_dict[symbol]

    @staticmethod
    def _validate_prob_dist(prob_dict):
        """
        checks if each value of the prob dist is in (0, 1],
        and the dist sums to 1
        """
        if not prob_dict:
            raise ValueError("probability dict is empty")

        sum_of_probs = 0
        for symbol, prob in prob_dict.items():
            if not 0 < prob <= 1:
                raise ValueError(f"probability of {symbol} is {prob}, not in (0, 1]")
            sum_of_probs += prob

        if abs(sum_of_probs - 1.0) > PROB_SUM_TOLERANCE:
            raise ValueError("probabilities do not sum to 1")


class Frequencies:
    """
    Wrapper around a frequency dict
    NOTE: Frequencies is a typical way to represent probability distributions using integers.
    Only the observed symbols are stored, so the dict stays small even when the symbols
    span a large range.
    """

    def __init__(self, freq_dict=None):
        self._validate_freq_dist(freq_dict)

        # NOTE: We use the fact that since python 3.6, dictionaries in python are
        # also OrderedDicts. https://realpython.com/python-ordereddict/
        self.freq_dict = freq_dict

    def __repr__(self):
        return f"Frequencies({self.freq_dict.__repr__()})"

    @classmethod
    def from_states(cls, states):
        """counts the occurrences of each state in the input

        Args:
            states: iterable of integer states

        Returns:
            Frequencies: {state: count, ...}, in order of first occurrence
        """
        count_dict = {}
        for s in states:
            s = int(s)
            count_dict[s] = count_dict.get(s, 0) + 1
        return cls(count_dict)

    @property
    def size(self):
        return len(self.freq_dict)

    @property
    def alphabet(self):
        return list(self.freq_dict)

    @property
    def freq_list(self):
        return [self.freq_dict[s] for s in self.alphabet]

    @property
    def total_freq(self) -> int:
        """returns the sum of all the frequencies"""
        return int(np.sum(self.freq_list))

    def frequency(self, symbol):
        return self.freq_dict[symbol]

    def get_prob_dist(self) -> ProbabilityDist:
        """returns the empirical distribution freq / total_freq

        Returns:
            ProbabilityDist: the probability of each symbol in freq_dict
        """
        total_freq = self.total_freq
        prob_dict = {}
        for s, f in self.freq_dict.items():
            prob_dict[s] = f / total_freq
        return ProbabilityDist(prob_dict)

    @staticmethod
    def _validate_freq_dist(freq_dict):
        """
        checks if each value of the freq dist is a positive integer
        """
        if not freq_dict:
            raise ValueError("frequency dict is empty")

        for symbol, freq in freq_dict.items():
            if not isinstance(freq, (int, np.integer)) or freq <= 0:
                raise ValueError(f"frequency of {symbol} must be a positive int, got {freq}")


class ProbabilityDistTest(unittest.TestCase):
    def test_creation(self):
        """
        checks if the creation and validity checks are passing for valid distribution
        """
        fair_coin_dist = ProbabilityDist({"H": 0.5, "T": 0.5})
        assert fair_coin_dist.size == 2
        assert fair_coin_dist.alphabet == ["H", "T"]
        assert fair_coin_dist.probability("T") == 0.5

        alphabet = list(range(10))
        dist = ProbabilityDist({i: 1 / 10 for i in alphabet})
        assert dist.prob_list == [0.1] * 10

    def test_validation_failure(self):
        """
        test if init fails for incorrect distributions
        """
        with self.assertRaises(ValueError):
            ProbabilityDist({"H": 0.5, "T": 0.4})

        with self.assertRaises(ValueError):
            ProbabilityDist({"H": 1.5, "T": -0.5})

        with self.assertRaises(ValueError):
            ProbabilityDist({})

    def test_normalize_prob_dict(self):
        dist = ProbabilityDist.normalize_prob_dict({0: 2, 1: 6})
        assert dist.prob_dict == {0: 0.25, 1: 0.75}


class FrequenciesTest(unittest.TestCase):
    def test_from_states(self):
        """counts are sparse and keyed in order of first occurrence"""
        freqs = Frequencies.from_states(np.array([5, 0, 5, 5, 1000]))
        assert freqs.freq_dict == {5: 3, 0: 1, 1000: 1}
        assert freqs.alphabet == [5, 0, 1000]
        assert freqs.total_freq == 5
        assert freqs.frequency(5) == 3

        # keys are python ints, not numpy scalars
        assert all(type(s) is int for s in freqs.alphabet)

    def test_get_prob_dist(self):
        freqs = Frequencies({"A": 7, "B": 1, "C": 2})
        prob_dist = freqs.get_prob_dist()
        assert prob_dist.prob_dict == {"A": 0.7, "B": 0.1, "C": 0.2}

    def test_validation_failure(self):
        with self.assertRaises(ValueError):
            Frequencies({"A": 0})

        with self.assertRaises(ValueError):
            Frequencies({"A": 1.5})

        with self.assertRaises(ValueError):
            Frequencies.from_states([])
