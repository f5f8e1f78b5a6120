"""
URL convertors - Path parameter matching for the route table.

Starlette's default ``str`` convertor needs at least one character, so a
request such as ``GET /v1/transaction/`` would never match its route and
would answer 404. The ``segment`` convertor also accepts the empty
segment, letting the validation gate report the missing parameter.
"""

from starlette.convertors import Convertor, register_url_convertor


class SegmentConvertor(Convertor[str]):
    """Single path segment, possibly empty."""

    regex = "[^/]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        value = str(value)
        if "/" in value:
            raise ValueError("May not contain path separators")
        return value


register_url_convertor("segment", SegmentConvertor())
