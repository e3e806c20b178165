"""Async HTTP client for the DVGUPS timetable endpoint.

The portal has no API: every view is a form POST to a Joomla component that
answers with an HTML fragment. The client only owns the transport (forming
the request, classifying failures, retrying) and hands the body text to the
pure decoders in src.timetable.pages.
"""

import asyncio
from datetime import date

import aiohttp
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.timetable.config import TimetableConfig, get_config
from src.timetable.errors import (
    BlockedNetworkError,
    InvalidResponseError,
    NoDataError,
    RateLimitError,
    TransientError,
)
from src.timetable.logging import get_logger
from src.timetable.models import Group, Schedule, ScheduleDay
from src.timetable.pages import decode_groups, decode_schedule, decode_schedule_days
from src.timetable.utils import format_api_date

log = get_logger(__name__)


class TimetableClient:
    """Fetches and decodes timetable views.

    Use as an async context manager, or call close() when done. An existing
    aiohttp session may be injected; it is then left open on close().

        async with TimetableClient() as client:
            groups = await client.fetch_groups("2")
            schedule = await client.fetch_schedule(groups[0].id)
    """

    def __init__(
        self,
        config: TimetableConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.config = config or get_config()
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "TimetableClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
        self._session = None

    @property
    def params(self) -> dict[str, str]:
        return {
            "Itemid": self.config.item_id,
            "option": self.config.option,
            "view": self.config.view,
        }

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
            "X-Requested-With": "XMLHttpRequest",
            "User-Agent": self.config.user_agent,
            "Referer": "https://dvgups.ru/",
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "ru-RU,ru;q=0.9,en;q=0.8",
        }

    async def fetch_groups(self, faculty_id: str, on: date | None = None) -> list[Group]:
        """Groups of a faculty that have classes around ``on`` (today by default)."""
        on = on or date.today()
        body = await self._post(
            {"FacID": faculty_id, "GroupID": "no", "Time": format_api_date(on)}
        )
        return decode_groups(body, faculty_id)

    async def fetch_schedule(
        self,
        group_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        faculty_id: str = "",
    ) -> Schedule:
        """A group's schedule for the week starting at ``start_date``."""
        start_date = start_date or date.today()
        body = await self._post({"GroupID": group_id, "Time": format_api_date(start_date)})
        return decode_schedule(
            body, group_id, start_date, end_date, faculty_id=faculty_id
        )

    async def fetch_schedule_by_room(self, on: date | None = None) -> list[ScheduleDay]:
        """Room-indexed schedule days around ``on``."""
        on = on or date.today()
        body = await self._post({"AudID": "no", "Time": format_api_date(on)})
        return decode_schedule_days(body)

    async def fetch_schedule_by_teacher(
        self, on: date | None = None
    ) -> list[ScheduleDay]:
        """Teacher-indexed schedule days around ``on``."""
        on = on or date.today()
        body = await self._post({"PrepID": "no", "Time": format_api_date(on)})
        return decode_schedule_days(body)

    async def _post(self, form: dict[str, str]) -> str:
        """POST a form, retrying transient failures.

        Raises:
            TransientError: Still failing after config.max_attempts.
            PermanentError: Non-retryable status or undecodable body.
        """
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.config.max_attempts),
            wait=wait_exponential(multiplier=self.config.retry_backoff, max=10),
            retry=retry_if_exception_type(TransientError),
            reraise=True,
        ):
            with attempt:
                return await self._post_once(form)

    async def _post_once(self, form: dict[str, str]) -> str:
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        log.debug("request_sent", url=self.config.base_url, form=form)
        timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
        try:
            async with self._session.post(
                self.config.base_url,
                params=self.params,
                data=form,
                headers=self.headers,
                timeout=timeout,
            ) as response:
                _check_status(response.status)
                raw = await response.read()
        except (asyncio.TimeoutError, aiohttp.ClientConnectionError) as e:
            log.warning("request_failed", error=str(e), type=type(e).__name__)
            raise BlockedNetworkError(
                "Could not reach the timetable server; a VPN or network filter "
                f"may be blocking dvgups.ru: {e}"
            ) from e
        except aiohttp.ClientPayloadError as e:
            log.warning("request_failed", error=str(e), type=type(e).__name__)
            raise TransientError(f"Response body was cut short: {e}") from e

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise NoDataError("Response body is not UTF-8 text") from e


def _check_status(status: int) -> None:
    if status == 200:
        return
    log.warning("request_failed", status=status)
    if status == 429:
        raise RateLimitError("Timetable server is rate limiting requests")
    if status >= 500:
        raise TransientError(f"Timetable server error {status}")
    raise InvalidResponseError(status)
