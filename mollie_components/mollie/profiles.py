"""Merchant profile lookup that never fails the calling request."""

import logging
from dataclasses import dataclass
from typing import Optional

from mollie_components.mollie.client import MollieApiClient, MollieApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileLookup:
    """Outcome of fetching the current merchant profile id."""

    profile_id: str = ""
    error: Optional[MollieApiError] = None

    @property
    def fetched(self) -> bool:
        return self.error is None


async def lookup_profile_id(client: MollieApiClient) -> ProfileLookup:
    """
    Fetch the id of the profile the configured API key belongs to.

    API failures are logged and reported in the returned lookup with an
    empty profile id.
    """
    try:
        profile = await client.profiles.get("me")
    except MollieApiError as e:
        logger.warning(f"Could not fetch Mollie profile: {e}")
        return ProfileLookup(error=e)

    return ProfileLookup(profile_id=profile.id or "")
