from .values import parse_value, read_values

__all__ = [
    "parse_value",
    "read_values",
]
