"""
Daily symptom log service.

Typical usage:
    service = DailyLogService()
    log = service.create_log(user_id, DailyLogInput(date=date.today()), profile)
    logs = service.list_logs(user_id)
"""
import uuid
from typing import List, Optional

from aws_lambda_powertools import Logger

from src.models.daily_log import DailyLog, DailyLogInput
from src.models.profile import PcosProfile
from src.services.exceptions import ProfileNotFoundError
from src.services.phase import compute_phase
from src.utils.dynamo import get_dynamo, create_pk, create_log_sk, strip_keys

logger = Logger()

class DailyLogService:
    """Store and list a user's daily logs."""

    def __init__(self, dynamo=None):
        self.dynamo = dynamo or get_dynamo()

    def list_logs(self, user_id: str) -> List[DailyLog]:
        """
        List a user's logs, newest first.

        Args:
            user_id: Authenticated user ID

        Returns:
            Daily logs ordered by date descending
        """
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_prefix="LOG#",
            newest_first=True
        )
        logs = [DailyLog(**strip_keys(item)) for item in items]
        return sorted(logs, key=lambda log: log.date, reverse=True)

    def create_log(
        self,
        user_id: str,
        data: DailyLogInput,
        profile: Optional[PcosProfile] = None
    ) -> DailyLog:
        """
        Store a daily log.

        When cycle_day is omitted it is derived from the profile for the log's
        date, as a 1-based display day.

        Args:
            user_id: Authenticated user ID
            data: Submitted log fields
            profile: User's profile, used to derive cycle_day

        Returns:
            The stored log

        Raises:
            ProfileNotFoundError: If cycle_day is missing and there is no profile to derive it from
            InvalidProfileError: If the profile cannot produce a phase
        """
        cycle_day = data.cycle_day
        if cycle_day is None:
            if profile is None:
                raise ProfileNotFoundError("Create a PCOS profile first or provide cycle_day")
            offset, _ = compute_phase(profile.to_cycle_profile(), data.date)
            cycle_day = offset + 1

        log = DailyLog(
            log_id=uuid.uuid4().hex,
            user_id=user_id,
            **{**data.model_dump(), "cycle_day": cycle_day}
        )

        self.dynamo.put_item({
            "PK": create_pk(user_id),
            "SK": create_log_sk(log.date.isoformat(), log.log_id),
            **log.model_dump(mode="json")
        })

        logger.info("Created daily log", extra={
            "user_id": user_id,
            "date": log.date.isoformat(),
            "cycle_day": log.cycle_day,
            "symptom_count": len(log.symptoms)
        })
        return log
