from __future__ import annotations
import logging
from typing import Any, ClassVar, Dict, List, Optional

import requests

from wistia_api.common.dates import DayLike, day_param, month_bounds
from wistia_api.common.paging import fetch_all_pages
from wistia_api.entity import APIEntity
from wistia_api.http import WistiaClient
from wistia_api.media import Media
from wistia_api.project import Project
from wistia_api.settings import DEFAULT_BASE_URL, Settings
from wistia_api.stats import DailyStats, MonthlyStats, Stats

logger = logging.getLogger(__name__)


class Account(APIEntity):
    """
    A Wistia account, and the entry point of the library.

    The account owns the API key and the HTTP client; projects and medias keep
    a reference back to it to make their own calls. Without prefetched data the
    constructor fetches account.json straight away.
    """

    FIELDS: ClassVar[Dict[str, str]] = {
        "id": "id",
        "name": "name",
        "url": "url",
    }

    def __init__(
        self,
        key: str,
        data: Optional[Dict[str, Any]] = None,
        *,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.key = key
        self.id: Optional[int] = None
        self.name: Optional[str] = None
        self.url: Optional[str] = None
        self.settings = settings or Settings(base_url=DEFAULT_BASE_URL, api_token=key)
        self.client = WistiaClient(
            base_url=self.settings.base_url,
            key=key,
            timeout_s=self.settings.request_timeout_s,
            session=session,
        )
        if data is None:
            self.fetch_self()
        else:
            self.hydrate(data)

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, name={self.name!r}, url={self.url!r})"

    def call(
        self, path: str, method: str = "GET", params: Optional[Dict[str, Any]] = None
    ) -> Any:
        return self.client.call(path, method, params)

    def fetch_self(self) -> None:
        self.hydrate(self.call("account.json"))

    def create_project(self, name: str) -> Project:
        response = self.call("projects.json", "POST", {"name": name})
        logger.info("Created project %r", name)
        return Project.from_json(response, account=self)

    def get_project(self, public_id: str) -> Project:
        return Project.from_json(self.call(f"projects/{public_id}.json"), account=self)

    def get_projects(self, recursive: bool = False) -> List[Project]:
        """
        Lists the account's projects. Listed projects hold no medias; with
        recursive=True each one is fetched again to load them (one request
        per project).
        """
        projects = []
        for obj in self.call("projects.json") or []:
            p = Project.from_json(obj, account=self)
            if recursive:
                p.get_medias()
            projects.append(p)
        return projects

    def get_media(self, media_id: str | int) -> Media:
        return Media.from_json(self.call(f"medias/{media_id}.json"), account=self)

    def get_medias(self, per_page: Optional[int] = None) -> List[Media]:
        per_page = per_page or self.settings.page_size
        rows = fetch_all_pages(
            lambda page: self.call(
                "medias.json", params={"page": page, "per_page": per_page}
            ),
            per_page=per_page,
        )
        return [Media.from_json(r, account=self) for r in rows]

    def get_stats(self) -> Stats:
        return Stats.from_json(self.call("stats/account.json"))

    def get_daily_stats(self, day: DayLike) -> DailyStats:
        """`day` may be a date/datetime, an ISO string or a Unix timestamp."""
        day_s = day_param(day)
        response = self.call(
            "stats/account/by_date.json",
            params={"start_date": day_s, "end_date": day_s},
        )
        stats = DailyStats(date=day_s)
        if response:
            stats.hydrate(response[0])
        return stats

    def get_monthly_stats(self, month: int, year: int) -> MonthlyStats:
        month, year = int(month), int(year)
        first, last = month_bounds(month, year)
        response = self.call(
            "stats/account/by_date.json",
            params={"start_date": first.isoformat(), "end_date": last.isoformat()},
        )
        stats = MonthlyStats(
            load_count=0, play_count=0, hours_watched=0.0, month=month, year=year
        )
        for r in response or []:
            stats.add_day(DailyStats.from_json(r))
        return stats
