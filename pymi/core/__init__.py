from pymi.core.discretizer import normalize_array
from pymi.core.joint_state import merge_arrays
from pymi.core.prob_dist import Frequencies, ProbabilityDist
from pymi.core.probability_state import ProbabilityState
