# File: tests/test_api.py
"""
Smoke tests for the REST API.
"""

from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)

SIMPLE_BEAM = {
    "span": 6.0,
    "segments": 500,
    "boundary_condition": "simply_supported",
    "loads": [{"type": "point", "magnitude": 10.0, "position": 3.0}],
}


def test_health():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_analyze_simply_supported():
    response = client.post("/api/beam/analyze", json=SIMPLE_BEAM)
    assert response.status_code == 200

    data = response.json()
    assert data["reactions"]["Ra"] == 5.0
    assert data["reactions"]["Rb"] == 5.0
    assert data["maxValues"]["moment"] == 15.0
    assert data["maxValues"]["momentPosition"] == 3.0
    assert data["properties"]["boundaryCondition"] == "simply_supported"
    assert len(data["x"]) == 501
    assert data["summary"][0]["label"] == "Reaction at A (Ra)"


def test_analyze_uses_material_modulus():
    steel = client.post("/api/beam/analyze", json=SIMPLE_BEAM).json()
    timber = client.post("/api/beam/analyze", json={**SIMPLE_BEAM, "material": "timber"}).json()

    assert timber["properties"]["E"] == 11e9
    assert timber["maxValues"]["deflection"] > steel["maxValues"]["deflection"]


def test_analyze_rejects_bad_input():
    # Unknown material is a domain error
    response = client.post("/api/beam/analyze", json={**SIMPLE_BEAM, "material": "cheese"})
    assert response.status_code == 400

    # Non-positive span fails request validation
    response = client.post("/api/beam/analyze", json={**SIMPLE_BEAM, "span": 0})
    assert response.status_code == 422

    response = client.post("/api/beam/analyze", json={**SIMPLE_BEAM, "boundary_condition": "hinged"})
    assert response.status_code == 422


def test_export_csv():
    response = client.post("/api/beam/export/csv", json=SIMPLE_BEAM)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.text.splitlines()[0] == "x_m,shear_kN,moment_kNm,deflection_mm"


def test_section_endpoint():
    response = client.post("/api/section", json={"shape": "rectangle",
                                                 "dimensions": {"width": 0.1, "height": 0.2}})
    assert response.status_code == 200
    assert response.json()["y_max"] == 0.1

    response = client.post("/api/section", json={"shape": "circle",
                                                 "dimensions": {"side": 0.1}})
    assert response.status_code == 200


def test_materials_endpoint():
    response = client.get("/api/materials")
    keys = {item["key"] for item in response.json()}
    assert "steel" in keys
