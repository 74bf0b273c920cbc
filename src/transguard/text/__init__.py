"""Text helpers for preparing and ordering extracted strings.

- decode_escaped_unicode_values: Turn "\\u266f"-style escapes into characters
- replace_escaped_control_chars: Blank out escaped "\\n", "\\r", "\\t"
- remove_printf_commands / remove_hex_color_values: Strip formatting syntax
- natural_order_compare: Compare strings with numeric runs ordered by value
"""

from transguard.text.escapes import (
    decode_escaped_unicode_values,
    replace_escaped_control_chars,
)
from transguard.text.natural import (
    NumericToken,
    natural_order_compare,
    natural_sort_key,
    natural_sorted,
    parse_numeric_with_separators,
)
from transguard.text.patterns import remove_hex_color_values, remove_printf_commands

__all__ = [
    "decode_escaped_unicode_values",
    "replace_escaped_control_chars",
    "remove_printf_commands",
    "remove_hex_color_values",
    "NumericToken",
    "natural_order_compare",
    "natural_sort_key",
    "natural_sorted",
    "parse_numeric_with_separators",
]
