from fastapi.testclient import TestClient

from processdesk.config import FIXTURES_DIR, Settings
from processdesk.main import create_app
from processdesk.storage.memory_storage import MemoryStorage
from processdesk.storage.seed import load_seed_fixture


def count_rows(client) -> dict:
    counts = {"projects": 0}
    for project in client.get("/api/projects").json():
        counts["projects"] += 1
        for kind in ("team-members", "processes", "requirements", "test-cases", "cost-items", "activities"):
            counts[kind] = counts.get(kind, 0) + len(client.get(f"/api/projects/{project['id']}/{kind}").json())
    return counts


def test_init_db_seeds_demo_data(client):
    response = client.post("/api/init-db")

    assert response.status_code == 200
    assert response.json() == {"message": "Database initialized successfully", "seeded": True}

    projects = client.get("/api/projects").json()
    assert [p["name"] for p in projects] == ["Employee Onboarding", "Invoice Approval"]

    onboarding = projects[0]
    assert onboarding["completion"] == 78
    members = client.get(f"/api/projects/{onboarding['id']}/team-members").json()
    assert [m["initials"] for m in members] == ["JD", "SA", "MJ"]
    processes = client.get(f"/api/projects/{onboarding['id']}/processes").json()
    assert processes[0]["swimlanes"] == ["HR Department", "IT Department", "Facilities", "Manager"]


def test_init_db_is_idempotent(client):
    client.post("/api/init-db")
    once = count_rows(client)

    response = client.post("/api/init-db")

    assert response.status_code == 200
    assert response.json()["seeded"] is False
    assert count_rows(client) == once


def test_init_db_skips_when_projects_exist(client, project):
    response = client.post("/api/init-db")

    assert response.json()["seeded"] is False
    assert client.get("/api/projects").json() == [project]


def test_init_db_reports_failure(storage, tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text('{"projects": [{"name": "No description"}]}')
    settings = Settings(app_env="test", seed_fixture=broken)

    with TestClient(create_app(settings=settings, storage=storage)) as client:
        response = client.post("/api/init-db")

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to initialize database"
    assert response.json()["error"]


def test_development_mode_seeds_on_startup():
    settings = Settings(app_env="development")

    with TestClient(create_app(settings=settings, storage=MemoryStorage())) as client:
        assert len(client.get("/api/projects").json()) == 2


def test_startup_survives_seed_failure(tmp_path):
    settings = Settings(app_env="development", seed_fixture=tmp_path / "missing.json")

    with TestClient(create_app(settings=settings, storage=MemoryStorage())) as client:
        response = client.get("/api/projects")

    assert response.status_code == 200
    assert response.json() == []


def test_other_modes_do_not_seed():
    with TestClient(create_app(settings=Settings(app_env="production"), storage=MemoryStorage())) as client:
        assert client.get("/api/projects").json() == []


def test_seed_fixture_child_counts():
    dataset = load_seed_fixture(FIXTURES_DIR / "demo_seed.json")
    storage = MemoryStorage()

    assert storage.seed(dataset) is True

    onboarding = storage.projects.list()[0]
    assert len(storage.requirements.list(onboarding.id)) == 3
    assert len(storage.test_cases.list(onboarding.id)) == 3
    assert len(storage.cost_items.list(onboarding.id)) == 4
    assert len(storage.activities.list(onboarding.id)) == 3
