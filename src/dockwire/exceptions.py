# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
Exceptions raised while decoding engine payloads and encoding request options.
"""
from typing import Any, Dict, List, Optional


class DockwireError(Exception):
    """Base exception for all dockwire errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class SchemaError(DockwireError):
    """
    A payload did not match the record it was decoded as.

    Raised when a required field is missing, a field has the wrong JSON type,
    the payload is not valid JSON, or a normalized field has the wrong shape.
    """

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        index: Optional[int] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message, model=model, index=index)
        self.model = model
        self.index = index
        self.errors = errors or []

    @property
    def fields(self) -> List[str]:
        """Dotted wire paths of the offending fields."""
        return [".".join(str(part) for part in err.get("loc", ())) for err in self.errors]


class EncodingError(DockwireError):
    """A value handed to a builder or encoder cannot be represented on the wire."""

    pass
