"""
Ordered query-string assembly for request option builders.
"""
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from ..exceptions import EncodingError


class QueryBuilder:
    """
    Collects key/value pairs in the order they are appended and renders them
    as a form-encoded query string.

    Unset values are skipped rather than rendered as empty placeholders, and
    boolean flags render as ``1`` only when set.
    """

    def __init__(self):
        self._pairs: List[Tuple[str, str]] = []

    def flag(self, key: str, enabled: bool) -> "QueryBuilder":
        if enabled:
            self._pairs.append((key, "1"))
        return self

    def value(self, key: str, value: Optional[object]) -> "QueryBuilder":
        if value is not None:
            self._pairs.append((key, str(value)))
        return self

    def finish(self) -> str:
        """
        Render the collected pairs.

        :return: The encoded query string, empty when nothing was set.
        :raises EncodingError: If a value cannot be encoded as UTF-8.
        """
        try:
            return urlencode(self._pairs)
        except UnicodeEncodeError as e:
            raise EncodingError(
                f"Query parameter cannot be encoded: {e.reason}",
                keys=[key for key, _ in self._pairs],
            ) from e
