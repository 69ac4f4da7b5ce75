"""topn — stream a scored line file and keep the N highest-scoring records."""

from topn.errors import AccessError, ArgumentError, ConfigError, FormatError, TopNError  # noqa: F401
from topn.heap import MinHeap  # noqa: F401
from topn.models import Record, ScanStats  # noqa: F401
from topn.scan import TopNSelector, find_top_n_records, scan_lines  # noqa: F401

__version__ = "0.1.0"
