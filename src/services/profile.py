"""
PCOS profile storage service.

Typical usage:
    service = ProfileService()
    profile = service.require_profile(user_id)
    cycle_day, phase = compute_phase(profile.to_cycle_profile(), date.today())
"""
from typing import Optional
from datetime import datetime

from aws_lambda_powertools import Logger

from src.models.profile import PcosProfile, PcosProfileInput
from src.services.exceptions import ProfileNotFoundError
from src.utils.dynamo import get_dynamo, create_pk, strip_keys, PROFILE_SK

logger = Logger()

class ProfileService:
    """Read and write a user's PCOS profile."""

    def __init__(self, dynamo=None):
        self.dynamo = dynamo or get_dynamo()

    def get_profile(self, user_id: str) -> Optional[PcosProfile]:
        """
        Get a user's profile.

        Args:
            user_id: Authenticated user ID

        Returns:
            PcosProfile if one exists, None otherwise
        """
        item = self.dynamo.get_item({
            "PK": create_pk(user_id),
            "SK": PROFILE_SK
        })
        if not item:
            logger.debug("No profile found", extra={"user_id": user_id})
            return None
        return PcosProfile(**strip_keys(item))

    def require_profile(self, user_id: str) -> PcosProfile:
        """
        Get a user's profile or fail.

        Raises:
            ProfileNotFoundError: If the user has not created a profile
        """
        profile = self.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError("Create a PCOS profile first")
        return profile

    def save_profile(self, user_id: str, data: PcosProfileInput) -> PcosProfile:
        """
        Create or replace a user's profile.

        The owner is always the authenticated user; updated_at is refreshed.

        Args:
            user_id: Authenticated user ID
            data: Submitted profile fields

        Returns:
            The stored profile
        """
        existing = self.get_profile(user_id)
        profile = PcosProfile(
            user_id=user_id,
            updated_at=datetime.now(),
            **data.model_dump()
        )

        self.dynamo.put_item({
            "PK": create_pk(user_id),
            "SK": PROFILE_SK,
            **profile.model_dump(mode="json")
        })

        logger.info("Saved PCOS profile", extra={
            "user_id": user_id,
            "pcos_type": profile.pcos_type.value,
            "cycle_length": profile.cycle_length,
            "is_new": existing is None
        })
        return profile
