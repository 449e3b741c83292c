from .errors import InconsistentEntryShapeError
from .errors import InvalidArityError
from .errors import InvalidSuffixArrayError
from .errors import InvalidTerminatorError
from .errors import OutOfRangeError
from .errors import SuffixKitError

from .lcp import create_inverse_suffix_array
from .lcp import create_lcp_array

from .lcs import longest_common_substring
from .lcs import longest_common_substring_length

from .radix_sort import radix_sort
from .radix_sort import stable_counting_sort

from .string_index_map import LinearStringIndexMap
from .string_index_map import LogStringIndexMap
from .string_index_map import create_string_index_map

from .suffix_array import create_suffix_array

from .utils import AttributeDict
from .utils import default_terminator
from .utils import from_codes
from .utils import setup_logger
from .utils import str2bool
from .utils import to_codes

__version__ = "0.1.0"
