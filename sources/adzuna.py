import time
from typing import Any, Callable, Dict, List, Optional

import requests

from logger import log_error, log_warn
from schemas import Category, Job, JobSearchParams, JobSearchResult
from settings import AdzunaConfig

# Adzuna only covers South Africa among the African markets we list
SUPPORTED_COUNTRIES = ("za",)
COUNTRY_NAMES = {
    "ke": "Kenya",
    "za": "South Africa",
    "ng": "Nigeria",
    "gh": "Ghana",
}
CURRENCIES = {
    "ke": "KES",
    "za": "ZAR",
    "ng": "NGN",
    "gh": "GHS",
}

RATE_LIMIT_STATUS = 429
RATE_LIMIT_DELAY_S = 2.0


def is_supported_country(country: str) -> bool:
    return country in SUPPORTED_COUNTRIES


def format_salary(job: Job, country: str) -> Optional[str]:
    """'ZAR 20,000 - 30,000', or None unless both salary bounds are known."""
    if not job.salary_min or not job.salary_max:
        return None
    currency = CURRENCIES.get(country, "")
    return f"{currency} {round(job.salary_min):,} - {round(job.salary_max):,}".strip()


class AdzunaClient:
    """Job listings from the Adzuna API. Failures degrade to empty results."""

    def __init__(
        self,
        config: AdzunaConfig,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.session = session or requests.Session()
        self._sleep = sleep

    def _auth_params(self) -> Dict[str, str]:
        return {"app_id": self.config.app_id, "app_key": self.config.api_key}

    def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.config.base_url}{path}"
        response = self.session.get(url, params=params, timeout=self.config.timeout_s)
        if response.status_code == RATE_LIMIT_STATUS:
            # single retry after a fixed pause
            log_warn("Adzuna rate limit hit, retrying once", {"path": path, "delay_s": RATE_LIMIT_DELAY_S})
            self._sleep(RATE_LIMIT_DELAY_S)
            response = self.session.get(url, params=params, timeout=self.config.timeout_s)
        response.raise_for_status()
        return response.json()

    def get_categories(self, country: str) -> List[Category]:
        if not is_supported_country(country):
            return []

        try:
            data = self._get(f"/api/jobs/{country}/categories", self._auth_params())
            return [Category(**c) for c in data.get("results", [])]
        except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
            log_error(e, {"country": country})
            return []

    def search_jobs(self, params: JobSearchParams) -> JobSearchResult:
        if not is_supported_country(params.country):
            return JobSearchResult()

        query = {
            **self._auth_params(),
            "results_per_page": params.results_per_page or 10,
            "what": params.what or "",
            "where": params.where or "",
            "category": params.category or "",
            "max_days_old": params.max_days_old or 30,
            "sort_by": params.sort_by or "date",
        }
        try:
            data = self._get(f"/api/jobs/{params.country}/search/{params.page or 1}", query)
            return JobSearchResult(
                jobs=[Job(**j) for j in data.get("results", [])],
                total_jobs=int(data.get("count", 0)),
            )
        except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
            log_error(e, {"country": params.country, "page": params.page, "what": params.what})
            return JobSearchResult()
