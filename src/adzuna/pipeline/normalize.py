# src/adzuna/pipeline/normalize.py
"""
Flatten search results into simple rows (one dict per job).

Handy for printing, CSV export or spreadsheets, where the nested
company/location objects get in the way.
"""
from typing import List

from adzuna.models import JobSearchResults


def _created_ymd(raw: str | None) -> str:
    # Adzuna format: "2025-09-26T07:20:13Z"
    if not raw:
        return ""
    return raw.split("T", 1)[0]  # "YYYY-MM-DD"


def flatten_jobs(results: JobSearchResults) -> List[dict]:
    """
    Turn a JobSearchResults into a list of flat dicts:
    id, title, company, url, location, salary_min, salary_max, salary_estimated, created.
    """
    out: List[dict] = []
    for job in results.results:
        out.append({
            "id": job.id,
            "title": job.title.strip(),
            # Company/location display names live in nested objects that may be missing
            "company": job.company.display_name if job.company else None,
            "url": job.redirect_url,
            "location": job.location.display_name if job.location else None,
            "salary_min": job.salary_min,
            "salary_max": job.salary_max,
            "salary_estimated": job.salary_is_predicted,
            "created": _created_ymd(job.created),
        })
    return out
