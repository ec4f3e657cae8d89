from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

RESUME_JSON = {
    "basics": {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "location": {"city": "Berlin"},
        "summary": "Backend engineer building data platforms.",
    },
    "work": [
        {
            "company": "Acme",
            "position": "Engineer",
            "startDate": "2019-01",
            "endDate": "2023-01",
            "highlights": ["Built APIs used by 200 clients.", "Reduced latency by 30%."],
        }
    ],
    "skills": [{"name": "Python", "keywords": ["FastAPI", "PostgreSQL"]}],
    "meta": {"layoutSettings": {"columnCount": 1, "sectionTitles": {"work": None}}},
    "unknownField": "ignored",
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "gemini_configured" in data


def test_ats_score():
    response = client.post("/ats/score", json={"resume": RESUME_JSON})
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["total_score"] <= 100
    assert data["match_score"] is None
    assert data["keyword_match"] is None
    assert len(data["checks"]) == 17
    assert data["parsing_preview"].startswith("Jane Doe")
    assert isinstance(data["feedback"], list)


def test_ats_score_with_job_description():
    response = client.post(
        "/ats/score",
        json={"resume": RESUME_JSON, "job_description": "Python FastAPI engineer"},
    )
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["match_score"] <= 100
    assert "python" in data["keyword_match"]["matched"]
    assert any(c["id"] == "keyword-match" for c in data["checks"])


def test_ats_score_rejects_long_job_description():
    response = client.post(
        "/ats/score",
        json={"resume": RESUME_JSON, "job_description": "x" * 10001},
    )
    assert response.status_code == 400


def test_ats_score_requires_resume():
    response = client.post("/ats/score", json={"job_description": "Python"})
    assert response.status_code == 422


def test_deep_analysis_reports_provider_failure():
    with patch("services.ai_analysis.gemini_client.generate_text", AsyncMock(return_value=None)):
        response = client.post("/ats/deep-analysis", json={"resume": RESUME_JSON})
    assert response.status_code == 200
    data = response.json()
    assert data["analysis"] is None
    assert data["error"]


def test_deep_analysis_success():
    output = '{"score": 70, "strengths": ["Metrics"], "bulletFeedback": []}'
    with patch("services.ai_analysis.gemini_client.generate_text", AsyncMock(return_value=output)):
        response = client.post("/ats/deep-analysis", json={"resume": RESUME_JSON})
    assert response.status_code == 200
    data = response.json()
    assert data["error"] is None
    assert data["analysis"]["score"] == 70
    assert data["analysis"]["strengths"] == ["Metrics"]
