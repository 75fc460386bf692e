from __future__ import annotations

from typing import Any, Mapping, Protocol

from ..core.enums import LeaveStatus
from ..crud.repository import RecordRepository


class LeaveRequestRepository(RecordRepository, Protocol):
    def update_if_status(self, key, values: Mapping[str, Any], expected_status: LeaveStatus) -> int:
        """Update only while the row still has ``expected_status``.

        Returns 0 when the key is gone or somebody else changed the status first.
        """

        raise NotImplementedError
