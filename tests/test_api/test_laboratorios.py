"""
Tests for Laboratorio API endpoints.

Tests cover:
- Laboratorio creation with field validation (capacidad, estado, longitudes)
- tipoAnalisis JSON name
- CRUD round-trips
- Filtering by tipo
"""

import pytest
from fastapi.testclient import TestClient
from typing import Dict, Any

from database.models import LaboratorioORM


BASE = "/api/laboratorios"


class TestLaboratorioCreation:
    """Tests for POST /api/laboratorios."""

    def test_crear_laboratorio(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        response = client.post(BASE, json=laboratorio_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] >= 1
        assert data["tipoAnalisis"] == "Hemograma"
        assert "tipo_analisis" not in data
        for field, value in laboratorio_data.items():
            assert data[field] == value

    def test_acepta_tipo_analisis_snake_case(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any]
    ):
        payload = dict(laboratorio_data)
        payload["tipo_analisis"] = payload.pop("tipoAnalisis")

        response = client.post(BASE, json=payload)
        assert response.status_code == 201
        assert response.json()["tipoAnalisis"] == "Hemograma"

    def test_capacidad_cero_solo_reporta_capacidad(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any]
    ):
        response = client.post(BASE, json={**laboratorio_data, "capacidad": 0})

        assert response.status_code == 400
        errors = response.json()["detail"]["errors"]
        assert list(errors) == ["capacidad"]
        assert errors["capacidad"] == "El valor mínimo es 1"

    @pytest.mark.parametrize("capacidad,expected", [(0, 400), (1, 201), (500, 201), (501, 400)])
    def test_limites_capacidad(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any],
        capacidad: int,
        expected: int
    ):
        response = client.post(BASE, json={**laboratorio_data, "capacidad": capacidad})
        assert response.status_code == expected

    @pytest.mark.parametrize("length,expected", [(2, 400), (3, 201), (100, 201), (101, 400)])
    def test_limites_descripcion(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any],
        length: int,
        expected: int
    ):
        response = client.post(BASE, json={**laboratorio_data, "descripcion": "d" * length})
        assert response.status_code == expected

    @pytest.mark.parametrize("length,expected", [(4, 400), (5, 201), (50, 201), (51, 400)])
    def test_limites_tipo(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any],
        length: int,
        expected: int
    ):
        response = client.post(BASE, json={**laboratorio_data, "tipo": "t" * length})
        assert response.status_code == expected

    def test_tipo_analisis_corto(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        response = client.post(BASE, json={**laboratorio_data, "tipoAnalisis": "AB"})
        assert response.status_code == 400
        assert list(response.json()["detail"]["errors"]) == ["tipoAnalisis"]

    def test_tipo_analisis_faltante(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        payload = dict(laboratorio_data)
        del payload["tipoAnalisis"]
        response = client.post(BASE, json=payload)
        assert response.status_code == 400
        assert response.json()["detail"]["errors"] == {"tipoAnalisis": "El campo es obligatorio"}

    def test_capacidad_no_numerica(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        response = client.post(BASE, json={**laboratorio_data, "capacidad": "muchos"})
        assert response.status_code == 400
        assert "capacidad" in response.json()["detail"]["errors"]

    @pytest.mark.parametrize("capacidad", [True, "7", 7.0])
    def test_capacidad_debe_ser_entero(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any],
        capacidad: Any
    ):
        response = client.post(BASE, json={**laboratorio_data, "capacidad": capacidad})
        assert response.status_code == 400
        assert response.json()["detail"]["errors"] == {"capacidad": "Debe ser un número entero"}
        assert client.get(BASE).json() == []

    @pytest.mark.parametrize("length,expected", [(4, 400), (5, 201), (100, 201), (101, 400)])
    def test_limites_nombre(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any],
        length: int,
        expected: int
    ):
        response = client.post(BASE, json={**laboratorio_data, "nombre": "n" * length})
        assert response.status_code == expected

    @pytest.mark.parametrize("length,expected", [(2, 400), (3, 201), (100, 201), (101, 400)])
    def test_limites_tipo_analisis(
        self,
        client: TestClient,
        laboratorio_data: Dict[str, Any],
        length: int,
        expected: int
    ):
        response = client.post(BASE, json={**laboratorio_data, "tipoAnalisis": "a" * length})
        assert response.status_code == expected

    def test_estado_fuera_de_dominio(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        response = client.post(BASE, json={**laboratorio_data, "estado": "CERRADO"})
        assert response.status_code == 400
        assert response.json()["detail"]["errors"] == {
            "estado": "El estado debe ser ACTIVO o INACTIVO"
        }

    def test_varios_errores(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        response = client.post(
            BASE,
            json={**laboratorio_data, "nombre": "   ", "capacidad": 501}
        )
        assert response.status_code == 400
        errors = response.json()["detail"]["errors"]
        assert set(errors) == {"nombre", "capacidad"}
        assert client.get(BASE).json() == []

    def test_nombre_duplicado(
        self,
        client: TestClient,
        laboratorio_instance: LaboratorioORM,
        laboratorio_data: Dict[str, Any]
    ):
        response = client.post(
            BASE,
            json={**laboratorio_data, "nombre": laboratorio_instance.nombre.lower()}
        )
        assert response.status_code == 409


class TestLaboratorioRoundTrip:
    """CRUD round-trips on /api/laboratorios/{id}."""

    def test_crear_y_obtener(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        created = client.post(BASE, json=laboratorio_data).json()

        response = client.get(f"{BASE}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_actualizar(self, client: TestClient, laboratorio_instance: LaboratorioORM):
        update = {
            "nombre": "Laboratorio Norte II",
            "descripcion": "Bioquímica especializada",
            "tipo": "Bioquimica",
            "capacidad": 500,
            "estado": "INACTIVO",
            "tipoAnalisis": "Perfil hepático",
        }
        response = client.put(f"{BASE}/{laboratorio_instance.id}", json=update)
        assert response.status_code == 200
        assert response.json() == {"id": laboratorio_instance.id, **update}

        assert client.get(f"{BASE}/{laboratorio_instance.id}").json() == {
            "id": laboratorio_instance.id, **update
        }

    def test_actualizar_inexistente(self, client: TestClient, laboratorio_data: Dict[str, Any]):
        assert client.put(f"{BASE}/4242", json=laboratorio_data).status_code == 404

    def test_eliminar(self, client: TestClient, laboratorio_instance: LaboratorioORM):
        assert client.delete(f"{BASE}/{laboratorio_instance.id}").status_code == 204
        assert client.get(f"{BASE}/{laboratorio_instance.id}").status_code == 404
        assert client.delete(f"{BASE}/{laboratorio_instance.id}").status_code == 404


class TestLaboratorioFilter:
    """Tests for GET /api/laboratorios/tipo/{tipo}."""

    def test_filtrar_por_tipo(
        self,
        client: TestClient,
        laboratorio_instance: LaboratorioORM,
        laboratorio_data: Dict[str, Any]
    ):
        client.post(BASE, json=laboratorio_data)

        response = client.get(f"{BASE}/tipo/Hematologia")
        assert response.status_code == 200
        assert [item["nombre"] for item in response.json()] == ["Laboratorio Central"]

        response = client.get(f"{BASE}/tipo/Bioquimica")
        assert [item["id"] for item in response.json()] == [laboratorio_instance.id]

    def test_filtrar_sin_resultados(self, client: TestClient, laboratorio_instance: LaboratorioORM):
        response = client.get(f"{BASE}/tipo/Microbiologia")
        assert response.status_code == 204
