"""
Tests for benefits and benefit enrollments
"""
from fastapi import status


def test_list_active_benefits(client, employee_headers, seeded_store):
    seeded_store.update("benefits", "benefit-002", {"isActive": False})

    response = client.get("/api/v1/benefits", headers=employee_headers)
    assert [b["name"] for b in response.json()] == ["Health Insurance"]

    response = client.get("/api/v1/benefits", params={"activeOnly": False}, headers=employee_headers)
    assert len(response.json()) == 2


def test_create_benefit(client, hr_headers):
    response = client.post(
        "/api/v1/benefits",
        json={"name": "Gym", "type": "OTHER", "cost": 600},
        headers=hr_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"].startswith("benefit-")
    assert data["isActive"] is True


def test_enrollment_cost_defaults_to_benefit_cost(client, hr_headers):
    response = client.post(
        "/api/v1/benefits/enrollments",
        json={"employeeId": "emp-001", "benefitId": "benefit-001", "startDate": "2024-01-01"},
        headers=hr_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"].startswith("empbenefit-")
    assert data["cost"] == 5000
    assert data["status"] == "ACTIVE"

    response = client.post(
        "/api/v1/benefits/enrollments",
        json={"employeeId": "emp-002", "benefitId": "benefit-001", "startDate": "2024-01-01", "cost": 2500},
        headers=hr_headers,
    )
    assert response.json()["cost"] == 2500

    response = client.get("/api/v1/benefits/enrollments", params={"employeeId": "emp-001"}, headers=hr_headers)
    assert len(response.json()) == 1


def test_enroll_unknown_or_inactive_benefit(client, hr_headers, seeded_store):
    payload = {"employeeId": "emp-001", "benefitId": "benefit-missing", "startDate": "2024-01-01"}
    response = client.post("/api/v1/benefits/enrollments", json=payload, headers=hr_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND

    seeded_store.update("benefits", "benefit-002", {"isActive": False})
    payload["benefitId"] = "benefit-002"
    response = client.post("/api/v1/benefits/enrollments", json=payload, headers=hr_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_enrollment_end_before_start(client, hr_headers):
    response = client.post(
        "/api/v1/benefits/enrollments",
        json={"employeeId": "emp-001", "benefitId": "benefit-001", "startDate": "2024-02-01", "endDate": "2024-01-01"},
        headers=hr_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
