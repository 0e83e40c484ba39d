from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence

from logger import log_error, log_info
from schemas import Job, JobMatchRequest, JobMatchResponse, JobWithMatch, UserProfile

Analyzer = Callable[[JobMatchRequest], JobMatchResponse]


def _enrich_one(job: Job, profile: UserProfile, analyzer: Analyzer) -> JobWithMatch:
    try:
        match = analyzer(JobMatchRequest(job_description=job.description, user_profile=profile))
    except Exception as e:
        # A failed analysis leaves this job undecorated; the rest of the feed is unaffected
        log_error(e, {"job_id": job.id, "title": job.title})
        return JobWithMatch(job=job)
    return JobWithMatch(job=job, match=match)


def enrich_jobs(
    jobs: Sequence[Job],
    profile: UserProfile,
    analyzer: Analyzer,
    max_workers: int = 5,
) -> List[JobWithMatch]:
    """Analyze every job concurrently; results keep the input order."""
    if not jobs:
        return []

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(jobs)))) as pool:
        results = list(pool.map(lambda job: _enrich_one(job, profile, analyzer), jobs))

    matched = sum(1 for r in results if r.match is not None)
    log_info("Enriched job feed", {"jobs": len(results), "matched": matched})
    return results
