"""
Read-only view over the headers of an HTTP response.

Accepts a `requests.Response`, any object exposing a ``headers`` mapping, or
a plain mapping. Values may be single strings or sequences of strings; only
the first value of a header is ever returned by lookups.
"""

from typing import Any, Iterator, List, Optional, Tuple

from requests.structures import CaseInsensitiveDict


class ResponseHeaders:
    """
    Case-insensitive header map with first-value lookup.

    Header names keep the casing and the order in which they were received.
    Repeated header names (e.g. from urllib3's ``HTTPHeaderDict.items()``)
    accumulate their values in arrival order.
    """

    def __init__(self, headers: Any = None):
        self._values: CaseInsensitiveDict = CaseInsensitiveDict()
        self._received: List[Tuple[str, List[str]]] = []
        if headers is None:
            return
        for name, value in headers.items():
            # HttpURLConnection-style maps carry the status line under a None key
            if name is None:
                continue
            if isinstance(value, (list, tuple)):
                values = [str(v) for v in value]
            else:
                values = [str(value)]
            self._received.append((name, values))
            if name in self._values:
                self._values[name].extend(values)
            else:
                self._values[name] = list(values)

    @classmethod
    def from_response(cls, response: Any) -> "ResponseHeaders":
        """Build a header view from a response object or a header mapping."""
        if isinstance(response, cls):
            return response
        headers = getattr(response, "headers", response)
        if not hasattr(headers, "items"):
            raise TypeError(f"Cannot read headers from {type(response).__name__}")
        return cls(headers)

    def get_header(self, name: str) -> Optional[str]:
        """Return the first value of header ``name``, or None when absent."""
        values = self._values.get(name)
        if not values:
            return None
        return values[0]

    def get_all(self, name: str) -> List[str]:
        """Return every value received for header ``name``."""
        return list(self._values.get(name, []))

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        """Iterate (name, values) pairs in arrival order."""
        for name, values in self._values.items():
            yield name, list(values)

    def received_items(self) -> Iterator[Tuple[str, List[str]]]:
        """
        Iterate header entries exactly as received, without merging names
        that differ only in case.
        """
        for name, values in self._received:
            yield name, list(values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ResponseHeaders({dict(self._values.items())!r})"
