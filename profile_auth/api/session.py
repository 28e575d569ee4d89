"""Session cache.

The cached LoginResponse lives in caller-provided storage. Every read goes
back to that storage; a record is served only while its access token is
strictly before expiry, otherwise a new login runs and its result replaces
the stored record before it is returned.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

import structlog

from profile_auth.encoding import Rfc3339Millis, epoch_millis
from profile_auth.interfaces import ILoginResponseStore, ITimestamper
from profile_auth.messages import LoginResponse, UserProfile

logger = structlog.get_logger(__name__)


class SessionCache:
    """Freshness-checked holder of the last successful login.

    Refreshes are serialised per instance: callers that find the record stale
    while another refresh is running wait for it and reuse its result instead
    of starting a second login.

    Attributes:
        store: Storage for the login session.
    """

    def __init__(
        self,
        store: ILoginResponseStore,
        login: Callable[[], Awaitable[LoginResponse]],
        timestamper: Optional[ITimestamper] = None,
    ) -> None:
        self.store = store
        self._login = login
        self._timestamper: ITimestamper = timestamper or Rfc3339Millis()
        self._refresh_lock = asyncio.Lock()

    def _now_ms(self) -> int:
        return epoch_millis(self._timestamper.now())

    async def _fresh_record(self) -> Optional[LoginResponse]:
        record = await self.store.get_login_response()
        if record is not None and record.token.is_fresh(self._now_ms()):
            return record
        return None

    async def get_login_response(self) -> LoginResponse:
        """Return a fresh session, logging in again when needed.

        Raises:
            ProfileAuthError: Any error from the login protocol. The store is
                left untouched on failure.
        """
        record = await self._fresh_record()
        if record is not None:
            logger.debug("session_cache_hit")
            return record

        async with self._refresh_lock:
            # another caller may have refreshed while we waited
            record = await self._fresh_record()
            if record is not None:
                logger.debug("session_refreshed_concurrently")
                return record

            logger.info("session_stale_signing_in")
            record = await self._login()
            await self.store.set_login_response(record)
            return record

    async def get_access_token(self) -> str:
        """Return a fresh access token."""
        return (await self.get_login_response()).token.access_token

    async def get_user_profile(self) -> UserProfile:
        """Return the profile of a fresh session."""
        return (await self.get_login_response()).profile

    async def is_signed_in(self) -> bool:
        """Whether any session, fresh or not, is stored."""
        return await self.store.get_login_response() is not None
