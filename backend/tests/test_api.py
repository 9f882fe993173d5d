import json
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from main import app
from models.schemas.structural_snapshot import StructuralSnapshot

client = TestClient(app)

FULL_DATA = {
    "summary": "Senior backend engineer with a decade of experience in payments.",
    "enhancedExperience": [{"title": "Engineer", "company": "Acme", "description": "Cut latency by 40%"}],
    "enhancedSkills": ["Python", "Go", "SQL", "Docker", "AWS"],
    "enhancedEducation": [{"degree": "BSc", "school": "KSU", "year": "2014"}],
}

EMPTY_DATA = {
    "summary": "",
    "experience": [],
    "enhancedExperience": [],
    "skills": [],
    "enhancedSkills": [],
    "education": [],
    "enhancedEducation": [],
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_check_compatible():
    response = client.post("/ats/check", json={
        "data": FULL_DATA,
        "snapshot": {"image_count": 0, "table_count": 0, "vector_icon_count": 0, "rendered_height_px": 2246},
    })
    assert response.status_code == 200
    report = response.json()
    assert report["compatible"] is True
    assert report["total"] == 0
    assert report["groups"] == []
    assert report["headline_alt"] == "Your CV is fully ATS-compatible!"


def test_check_without_snapshot():
    response = client.post("/ats/check", json={"data": EMPTY_DATA})
    assert response.status_code == 200
    report = response.json()
    assert report["compatible"] is False
    assert report["total"] == 3
    assert [g["severity"] for g in report["groups"]] == ["warning", "suggestion"]
    assert len(report["groups"][1]["findings"]) == 2
    assert "message_alt" in report["groups"][0]["findings"][0]


def test_check_rejects_negative_counts():
    response = client.post("/ats/check", json={
        "data": FULL_DATA,
        "snapshot": {"image_count": -1},
    })
    assert response.status_code == 422


def test_check_html():
    response = client.post("/ats/check/html", json={
        "data": FULL_DATA,
        "html": "<div><img src='me.png'><table><tr><td>x</td></tr></table></div>",
        "rendered_height_px": 3500,
    })
    assert response.status_code == 200
    report = response.json()
    assert [g["severity"] for g in report["groups"]] == ["error", "warning"]
    assert len(report["groups"][0]["findings"]) == 2
    assert "4 pages" in report["groups"][1]["findings"][0]["message_alt"]


def test_check_pdf_rejects_non_pdf():
    response = client.post(
        "/ats/check/pdf",
        files={"resume_file": ("resume.txt", b"not a pdf", "text/plain")},
        data={"data": json.dumps(FULL_DATA)},
    )
    assert response.status_code == 400


def test_check_pdf_rejects_bad_data():
    response = client.post(
        "/ats/check/pdf",
        files={"resume_file": ("resume.pdf", b"%PDF", "application/pdf")},
        data={"data": "{not json"},
    )
    assert response.status_code == 422


def test_check_pdf_unparseable():
    response = client.post(
        "/ats/check/pdf",
        files={"resume_file": ("resume.pdf", b"definitely not a pdf", "application/pdf")},
        data={"data": json.dumps(FULL_DATA)},
    )
    assert response.status_code == 400


@patch("api.router.PdfSnapshotProvider")
def test_check_pdf(mock_provider):
    mock_provider.return_value.snapshot.return_value = StructuralSnapshot(
        image_count=2, rendered_height_px=2245
    )
    response = client.post(
        "/ats/check/pdf",
        files={"resume_file": ("resume.pdf", b"%PDF-1.7", "application/pdf")},
        data={"data": json.dumps(FULL_DATA)},
    )
    assert response.status_code == 200
    report = response.json()
    assert report["total"] == 1
    assert report["groups"][0]["severity"] == "error"


@patch("services.gemini_client.generate_json", new_callable=AsyncMock)
def test_enhance(mock_generate):
    mock_generate.return_value = {**FULL_DATA, "fullName": "Sara", "enhancedSkills": ["Python"]}
    response = client.post("/resume/enhance", json={"resume_text": "Sara, engineer at Acme"})
    assert response.status_code == 200
    body = response.json()
    assert body["resume"]["fullName"] == "Sara"
    assert body["report"]["total"] == 1
    assert "Too few skills" in body["report"]["groups"][0]["findings"][0]["message_alt"]


@patch("services.gemini_client.generate_json", new_callable=AsyncMock)
def test_enhance_service_unavailable(mock_generate):
    mock_generate.return_value = None
    response = client.post("/resume/enhance", json={"resume_text": "Sara, engineer at Acme"})
    assert response.status_code == 503


def test_enhance_rejects_blank_text():
    response = client.post("/resume/enhance", json={"resume_text": "   "})
    assert response.status_code == 400


def test_enhance_upload_rejects_unknown_type():
    response = client.post(
        "/resume/enhance/upload",
        files={"resume_file": ("resume.jpg", b"\xff\xd8", "image/jpeg")},
    )
    assert response.status_code == 400
