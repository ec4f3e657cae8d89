"""Shared test configuration and resume factories."""

import copy

import pytest

from models.resume import ResumeDocument

BASE_RESUME = {
    "basics": {
        "name": "Jane Doe",
        "label": "Backend Engineer",
        "email": "jane.doe@example.com",
        "phone": "+1 555 123 4567",
        "location": {"city": "Berlin", "country": "Germany"},
    },
}

STRONG_RESUME = {
    "basics": {
        **BASE_RESUME["basics"],
        "summary": (
            "Backend engineer with seven years of experience building distributed "
            "systems in Python and Go. Specializes in cloud infrastructure, data "
            "pipelines and API design for high traffic products."
        ),
    },
    "work": [
        {
            "company": "Acme Corp",
            "position": "Senior Engineer",
            "startDate": "2018-01",
            "endDate": "2022-06",
            "highlights": [
                "Led migration of 12 services to Kubernetes, cutting deploy time by 40%.",
                "Built Python data pipelines serving 500 users per second.",
                "Reduced cloud spend by $20000 through rightsizing.",
            ],
        },
        {
            "company": "Beta Labs",
            "position": "Software Engineer",
            "startDate": "2015-03",
            "endDate": "2017-12",
            "highlights": [
                "Developed REST APIs used by 300 clients.",
                "Improved test coverage by 35% across the platform.",
                "Delivered 3x faster search with Elasticsearch.",
            ],
        },
    ],
    "education": [
        {
            "institution": "State University",
            "area": "Computer Science",
            "studyType": "BSc",
            "startDate": "2011",
            "endDate": "2015",
        },
    ],
    "skills": [
        {"name": "Backend", "keywords": ["Python", "Go", "PostgreSQL"]},
        {"name": "Infrastructure", "keywords": ["Kubernetes", "Terraform"]},
    ],
}

WEAK_RESUME = {
    "basics": {"name": "Sam Smith", "summary": "Hard worker and team player."},
    "work": [
        {
            "company": "Corner Shop",
            "position": "Clerk",
            "highlights": ["Responsible for the register", "Helped customers"],
        },
    ],
}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the HTTP app end to end"
    )


def _build(base: dict, overrides: dict) -> ResumeDocument:
    data = copy.deepcopy(base)
    data.update(copy.deepcopy(overrides))
    return ResumeDocument.model_validate(data)


@pytest.fixture
def make_resume():
    """Factory: contact-only resume with top-level sections replaced by kwargs."""
    def _make(**overrides) -> ResumeDocument:
        return _build(BASE_RESUME, overrides)
    return _make


@pytest.fixture
def strong_resume() -> ResumeDocument:
    return _build(STRONG_RESUME, {})


@pytest.fixture
def weak_resume() -> ResumeDocument:
    return _build(WEAK_RESUME, {})
