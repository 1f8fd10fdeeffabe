"""HTTP client for the upstream allergy report page."""

import logging

import httpx

from pollencast.config.schema import DEFAULT_USER_AGENT, KXAN_REPORT_URL

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the report page cannot be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ReportClient:
    """Single GET against the report URL. No retries; the caller owns that policy."""

    def __init__(
        self,
        url: str = KXAN_REPORT_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 15.0,
    ):
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch_html(self) -> str:
        headers = {"User-Agent": self.user_agent, "Accept": "text/html"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(self.url, headers=headers, follow_redirects=True)
        except httpx.RequestError as e:
            logger.error("Report request failed for %s: %s", self.url, e)
            raise FetchError(f"request to {self.url} failed: {e}") from e

        if not resp.is_success:
            logger.error("Report %s returned %d", self.url, resp.status_code)
            raise FetchError(
                f"{self.url} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FetchError(f"{self.url} body is not UTF-8: {e}") from e
