"""
Display-side derivations over fetched records. Nothing here is stored.
"""

from __future__ import annotations

from typing import Iterable

from folio.contract.schemas import Project, Publication


def selected_publications(publications: Iterable[Publication]) -> list[Publication]:
    """
    Publications flagged for the featured list on the home page.
    """
    return [pub for pub in publications if pub.is_selected]


def _matches(pub: Publication, needle: str) -> bool:
    return any(needle in value.lower() for value in (pub.title, pub.venue, pub.authors))


def group_by_year(publications: Iterable[Publication], search: str = "") -> list[tuple[int, list[Publication]]]:
    """
    Filter by a case-insensitive substring of title, venue or authors, then
    group by year with the newest year first. Order within a year is kept.
    """
    needle = (search or "").strip().lower()
    grouped: dict[int, list[Publication]] = {}
    for pub in publications:
        if needle and not _matches(pub, needle):
            continue
        grouped.setdefault(pub.year, []).append(pub)
    return sorted(grouped.items(), key=lambda item: item[0], reverse=True)


def technology_tags(project: Project) -> list[str]:
    # "Python, PyTorch" -> ["Python", "PyTorch"]
    if not project.technologies:
        return []
    return [tag.strip() for tag in project.technologies.split(",") if tag.strip()]
