"""
Description:
Normalize list-shaped model output that may arrive as a single delimited string.

Arguments:
- value: Either a list of strings or a newline-delimited string.

Returns:
- A list of strings. Strings are split on newlines with empty segments dropped;
  lists are returned unchanged.
"""
from typing import List, Union


def coerce_string_list(value: Union[str, List[str]]) -> List[str]:
    if isinstance(value, str):
        return [line for line in value.split("\n") if line]
    if isinstance(value, list):
        return value
    raise TypeError(f"Expected a string or a list of strings, got {type(value).__name__}")
