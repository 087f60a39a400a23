"""Integration tests for the job board HTTP API."""

from fastapi.testclient import TestClient

from jobboard.services.api import create_app


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["seeded"] is True


def test_list_jobs_default_page(client):
    response = client.get("/jobs")
    assert response.status_code == 200
    body = response.json()
    assert body["totalCount"] == 6
    assert [job["id"] for job in body["jobs"]] == ["4", "1", "2", "3", "5", "6"]


def test_list_jobs_with_filters_and_pagination(client):
    response = client.get("/jobs", params={"employmentType": "Full-time", "page": 1, "limit": 2})
    body = response.json()
    assert [job["id"] for job in body["jobs"]] == ["4", "1"]
    assert body["totalCount"] == 3

    body = client.get("/jobs", params={"employmentType": "Full-time", "page": 2, "limit": 2}).json()
    assert [job["id"] for job in body["jobs"]] == ["6"]


def test_all_sentinel_means_no_filter(client):
    body = client.get("/jobs", params={"employmentType": "all", "location": "all"}).json()
    assert body["totalCount"] == 6


def test_search_and_remote(client):
    body = client.get("/jobs", params={"searchTerm": "designer"}).json()
    assert {job["id"] for job in body["jobs"]} == {"2", "5"}

    body = client.get("/jobs", params={"remoteOnly": "true", "location": "Toronto, ON"}).json()
    assert body == {"jobs": [], "totalCount": 0}


def test_invalid_page_rejected(client):
    assert client.get("/jobs", params={"page": 0}).status_code == 422
    assert client.get("/jobs", params={"limit": 0}).status_code == 422


def test_unique_values(client):
    assert client.get("/jobs/unique/employmentType").json() == [
        "Contract",
        "Full-time",
        "Part-time",
        "Temporary",
    ]
    response = client.get("/jobs/unique/title")
    assert response.status_code == 422
    assert "field" in response.json()["errors"]


def test_get_job_and_not_found(client):
    job = client.get("/jobs/1").json()
    assert job["title"] == "Senior Frontend Developer"
    assert job["salary"] == {"min": 120000, "max": 150000, "currency": "CAD", "visible": True}

    response = client.get("/jobs/does-not-exist")
    assert response.status_code == 404
    assert "404 - Job not found" in response.json()["detail"]


def test_job_without_salary_omits_it(client):
    assert "salary" not in client.get("/jobs/5").json()


def test_create_update_delete_job(client, new_job_payload):
    response = client.post("/jobs", json=new_job_payload)
    assert response.status_code == 201
    created = response.json()
    assert created["id"]
    assert created["postedDate"]

    body = client.get("/jobs", params={"remoteOnly": "true"}).json()
    assert [job["id"] for job in body["jobs"]] == [created["id"]]

    response = client.put(
        f"/jobs/{created['id']}",
        json={**new_job_payload, "title": "Principal Engineer", "postedDate": "1999-01-01T00:00:00Z"},
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Principal Engineer"
    assert updated["postedDate"] == created["postedDate"]

    assert client.delete(f"/jobs/{created['id']}").status_code == 200
    assert client.get(f"/jobs/{created['id']}").status_code == 404


def test_update_missing_job_is_404(client, new_job_payload):
    assert client.put("/jobs/missing", json=new_job_payload).status_code == 404


def test_delete_missing_job_is_noop(client):
    assert client.delete("/jobs/missing").json() == {}
    assert client.get("/jobs").json()["totalCount"] == 6


def test_create_job_requires_fields(client, new_job_payload):
    response = client.post("/jobs", json={**new_job_payload, "title": "  "})
    assert response.status_code == 422
    assert response.json()["errors"] == {"title": "Title is required."}


def test_application_flow(client, application_payload):
    response = client.post("/applications", json=application_payload)
    assert response.status_code == 201
    created = response.json()
    assert created["submittedAt"]
    assert created["jobTitle"] == "Data Analyst"

    listed = client.get("/applications").json()
    assert [app["id"] for app in listed] == [created["id"]]

    assert client.delete(f"/applications/{created['id']}").status_code == 200
    assert client.get("/applications").json() == []


def test_application_validation_errors(client, application_payload):
    response = client.post(
        "/applications",
        json={**application_payload, "email": "bad", "dataConsent": False, "availability": []},
    )
    assert response.status_code == 422
    assert set(response.json()["errors"]) == {"email", "dataConsent", "availability"}
    assert client.get("/applications").json() == []


def test_inquiry_flow(client, inquiry_payload):
    created = client.post("/inquiries", json=inquiry_payload).json()
    assert created["companyName"] == "Acme Staffing"
    assert [inq["id"] for inq in client.get("/inquiries").json()] == [created["id"]]

    client.delete(f"/inquiries/{created['id']}")
    assert client.get("/inquiries").json() == []


def test_export_returns_whole_dataset(client, inquiry_payload):
    client.post("/inquiries", json=inquiry_payload)

    response = client.get("/data", headers={"Origin": "https://example.org"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "https://example.org")
    body = response.json()
    assert set(body) == {"jobs", "employeeApplications", "employerInquiries"}
    assert len(body["jobs"]) == 6
    assert body["employerInquiries"][0]["companyName"] == "Acme Staffing"


def test_corrupt_store_is_500(test_settings):
    app = create_app(test_settings)
    with TestClient(app) as client:
        client.portal.call(app.state.store._put_raw, "jobs", "not json")
        response = client.get("/jobs")
    assert response.status_code == 500
    assert "Corrupt data" in response.json()["detail"]


def test_salary_range_error_uses_errors_map(client, new_job_payload):
    payload = {**new_job_payload, "salary": {"min": 5, "max": 1, "currency": "CAD", "visible": True}}

    response = client.post("/jobs", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"] == {"salary": "Salary minimum must not exceed the maximum."}
    assert client.put("/jobs/1", json=payload).json()["errors"] == {
        "salary": "Salary minimum must not exceed the maximum."
    }


def test_whitespace_search_term_is_a_literal_substring(client):
    assert client.get("/jobs", params={"searchTerm": "  "}).json() == {"jobs": [], "totalCount": 0}
    assert client.get("/jobs", params={"searchTerm": ""}).json()["totalCount"] == 6

    body = client.get("/jobs", params={"searchTerm": " Designer"}).json()
    assert {job["id"] for job in body["jobs"]} == {"2", "5"}


def test_fixture_salaries_keep_integers_after_write(client):
    client.delete("/jobs/6")
    jobs = {job["id"]: job for job in client.get("/data").json()["jobs"]}
    assert jobs["1"]["salary"]["min"] == 120000
    assert isinstance(jobs["1"]["salary"]["min"], int)
