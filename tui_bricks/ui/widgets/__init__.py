"""
Interactive reusable pieces.

Blocking prompts: number, text, yes/no, and single-key selection.
"""

from .prompts import (
    NUMBER_HINT,
    CONFIRM_HINT,
    SELECT_HINT,
    U32_MAX,
    parse_u32,
    input_u32,
    input_string,
    confirmation_prompt,
    select_from_list,
)

__all__ = [
    "NUMBER_HINT",
    "CONFIRM_HINT",
    "SELECT_HINT",
    "U32_MAX",
    "parse_u32",
    "input_u32",
    "input_string",
    "confirmation_prompt",
    "select_from_list",
]
