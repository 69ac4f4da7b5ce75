from topn.formatters.base import BaseFormatter, register_formatter, get_formatter, list_formatters  # noqa: F401

# Import built-in formatters to trigger registration
import topn.formatters.json_array  # noqa: F401
import topn.formatters.table  # noqa: F401
