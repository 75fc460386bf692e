from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.datetime_utils import today
from ..core.enums import LeaveStatus
from ..core.exceptions import ConstraintViolation, ValidationError
from ..crud.entity import EntityDescriptor
from ..crud.service import RecordService
from .model import LeaveRequest
from .repository import LeaveRequestRepository

logger = logging.getLogger(__name__)


class LeaveRequestService(RecordService):
    """Leave requests start Pending and are reviewed once: Pending -> Approved | Rejected."""

    def __init__(self, entity: EntityDescriptor, records: LeaveRequestRepository):
        super().__init__(entity, records)
        self._leaves = records

    def _before_insert(self, values: dict[str, Any]) -> dict[str, Any]:
        return {**values, "status": LeaveStatus.PENDING, "submitted_date": today()}

    def update(self, key, form: Mapping[str, str]) -> None:
        values = self.validate(form, editing=True)
        current = self.get(key)
        values = self.review(current, values)

        try:
            matched = self._leaves.update_if_status(key, values, current.status)
        except ConstraintViolation as e:
            raise self._violation(e) from e
        if not matched:
            # Reviewed (or deleted) by someone else since it was read.
            raise ValidationError("The leave request was changed by someone else. Reload it and try again.")
        logger.info("Updated leave request %s status=%s", key, values["status"].value)

    @staticmethod
    def review(current: LeaveRequest, values: Mapping[str, Any]) -> dict[str, Any]:
        """Apply the review rules to a validated edit and stamp ``review_date``."""

        status = values.get("status") or current.status
        reviewer = values.get("reviewed_by")

        if status != current.status:
            if current.status != LeaveStatus.PENDING:
                raise ValidationError(
                    f"A leave request that is already {current.status.value.lower()} cannot change status"
                )
            if reviewer is None:
                raise ValidationError("A reviewer is required to approve or reject a leave request")
        elif reviewer is None and current.status != LeaveStatus.PENDING:
            raise ValidationError("The reviewer of a reviewed leave request cannot be cleared")

        if reviewer is None:
            review_date = None
        elif status != current.status or reviewer != current.reviewed_by:
            review_date = today()
        else:
            review_date = current.review_date

        return {**values, "status": status, "reviewed_by": reviewer, "review_date": review_date}
