"""
First-run content so a fresh deployment is not empty.
"""

from __future__ import annotations

import logging

from folio.contract.schemas import NewsInput, ProfileInput, ProjectInput, PublicationInput

from .base import Storage

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = ProfileInput(
    name="Alex Researcher",
    title="PhD Candidate in Computer Science",
    institution="University of Technology",
    bio=(
        "I am a PhD candidate researching AI and Human-Computer Interaction. "
        "My work focuses on making generative models more controllable and interpretable."
    ),
    email="alex@example.edu",
    github_url="https://github.com",
    scholar_url="https://scholar.google.com",
    twitter_url="https://twitter.com",
    linkedin_url="https://linkedin.com",
    cv_url="#",
    image_url=(
        "https://images.unsplash.com/photo-1500648767791-00dcc994a43e"
        "?w=800&auto=format&fit=crop&q=60&ixlib=rb-4.0.3"
    ),
)

DEFAULT_PUBLICATIONS = (
    PublicationInput(
        title="Generative Models for Creative Workflows",
        authors="A. Researcher, B. Advisor",
        venue="NeurIPS 2024",
        year=2024,
        abstract="We propose a new framework for integrating generative models into creative tools...",
        is_selected=True,
    ),
    PublicationInput(
        title="Understanding User Intent in AI Assistants",
        authors="A. Researcher, C. Colleague",
        venue="CHI 2023",
        year=2023,
        abstract="A study on how users formulate prompts...",
        is_selected=True,
    ),
)

DEFAULT_PROJECTS = (
    ProjectInput(
        title="OpenGen",
        description="An open-source library for generative art.",
        technologies="Python, PyTorch",
        image_url="https://images.unsplash.com/photo-1550751827-4bd374c3f58b",
        link="https://github.com",
    ),
)

DEFAULT_NEWS = (
    NewsInput(
        date="2024-01-15",
        content="Paper accepted to NeurIPS 2024!",
    ),
)


async def seed_if_empty(storage: Storage) -> bool:
    """
    Insert the default content unless a profile already exists.

    Returns True when rows were inserted.
    """
    existing = await storage.get_profile()
    if existing is not None:
        logger.info("seed_skipped profile_id=%s", existing["id"])
        return False

    await storage.update_profile(DEFAULT_PROFILE.model_dump())
    for publication in DEFAULT_PUBLICATIONS:
        await storage.create_publication(publication.model_dump())
    for project in DEFAULT_PROJECTS:
        await storage.create_project(project.model_dump())
    for item in DEFAULT_NEWS:
        await storage.create_news(item.model_dump())

    logger.info(
        "seed_inserted publications=%s projects=%s news=%s",
        len(DEFAULT_PUBLICATIONS),
        len(DEFAULT_PROJECTS),
        len(DEFAULT_NEWS),
    )
    return True
