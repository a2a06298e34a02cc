"""
Operation context for a single storage request.

Carries the client request id across the response parsing of one operation
and binds it as the logging correlation id while active.
"""

import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator

from .logging_config import current_request_id


@dataclass
class OperationContext:
    """Tracking data for one storage operation."""

    client_request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    start_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @contextmanager
    def activate(self) -> Iterator["OperationContext"]:
        """Bind this context's request id to log records emitted inside the block."""
        token = current_request_id.set(self.client_request_id)
        try:
            yield self
        finally:
            current_request_id.reset(token)
