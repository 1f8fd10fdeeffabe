"""Report scraper: fetches the upstream allergy report and parses it."""

import logging

from pollencast.config.schema import SourceConfig
from pollencast.ingest.report_client import ReportClient
from pollencast.ingest.report_parser import parse_report
from pollencast.models.common import utc_now
from pollencast.models.report import RawReport

logger = logging.getLogger(__name__)


class ReportScraper:
    def __init__(self, client: ReportClient):
        self.client = client

    @classmethod
    def from_config(cls, source: SourceConfig) -> "ReportScraper":
        return cls(
            ReportClient(
                url=source.url,
                user_agent=source.user_agent,
                timeout=source.timeout_seconds,
            )
        )

    async def fetch(self) -> RawReport:
        """Fetch and parse the report.

        Raises FetchError or ParseError; no retries are attempted here.
        """
        fetched_at = utc_now()
        html = await self.client.fetch_html()
        report = parse_report(html, fetched_at)
        logger.info(
            "Scraped report dated %s: cedar=%d elm=%d mold=%d entries, %d rows skipped",
            report.report_date, len(report.cedar), len(report.elm),
            len(report.mold), report.skipped_rows,
        )
        return report
