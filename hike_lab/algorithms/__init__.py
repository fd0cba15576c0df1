from .longest_path import longest_path_search, longest_simple_path
from .parallel import parallel_longest_path
