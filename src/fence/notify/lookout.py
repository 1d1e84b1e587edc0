"""Best-effort notification of downstream listeners after a profile update."""

from __future__ import annotations

import asyncio

import httpx

from ..config import LookoutSettings
from ..logging import get_logger
from ..profile.model import Profile

logger = get_logger(__name__)


class LookoutNotifier:
    """Posts updated profiles to the lookout internal update endpoint.

    Failures are logged and never raised: the update has already been
    committed when this runs.
    """

    def __init__(
        self,
        settings: LookoutSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.enabled = settings.internal_update_enabled
        self.endpoint = settings.internal_update_endpoint
        self.timeout = settings.timeout_seconds
        self._transport = transport

    async def notify(self, profile: Profile) -> bool:
        """Send ``profile`` to lookout. Returns whether the post succeeded.

        The whole post, body included, is bounded by ``timeout_seconds``.
        """
        if not self.enabled:
            return False

        try:
            async with asyncio.timeout(self.timeout):
                async with httpx.AsyncClient(
                    timeout=self.timeout, transport=self._transport
                ) as client:
                    response = await client.post(self.endpoint, json=profile.to_json())
                    response.raise_for_status()
        except Exception as e:
            logger.error(
                "Unable to post to lookout",
                endpoint=self.endpoint,
                user_id=profile.user_id.value,
                error=str(e) or type(e).__name__,
            )
            return False

        logger.info("Notified lookout", user_id=profile.user_id.value)
        return True
