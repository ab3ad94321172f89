"""
Fixtures compartidas.

FakePersonaAPI reemplaza al cliente HTTP: guarda los registros en memoria y
anota cada llamada en `llamadas` para poder afirmar qué pidió la interfaz.
"""
import itertools

import pytest

from personas.api import PersonaAPIError
from personas.models import Persona


class FakePersonaAPI:
    def __init__(self, personas=None):
        self.personas = list(personas or [])
        self.llamadas = []
        self.fallos = {}
        self._ids = itertools.count(1)

    def fallar(self, metodo, mensaje=None, status=500):
        self.fallos[metodo] = PersonaAPIError(mensaje, status=status)

    def _quizas_fallar(self, metodo):
        if metodo in self.fallos:
            raise self.fallos[metodo]

    def metodos(self):
        return [llamada[0] for llamada in self.llamadas]

    def listar(self):
        self.llamadas.append(("listar",))
        self._quizas_fallar("listar")
        return list(self.personas)

    def crear(self, borrador):
        self.llamadas.append(("crear", borrador.a_payload()))
        self._quizas_fallar("crear")
        datos = dict(borrador.a_payload(), _id=f"id{next(self._ids)}")
        persona = Persona.desde_api(datos)
        self.personas.append(persona)
        return persona

    def actualizar(self, persona_id, borrador):
        self.llamadas.append(("actualizar", persona_id, borrador.a_payload()))
        self._quizas_fallar("actualizar")
        datos = dict(borrador.a_payload(), _id=persona_id)
        self.personas = [
            Persona.desde_api(datos) if p.id == persona_id else p for p in self.personas
        ]

    def eliminar(self, persona_id):
        self.llamadas.append(("eliminar", persona_id))
        self._quizas_fallar("eliminar")
        self.personas = [p for p in self.personas if p.id != persona_id]


@pytest.fixture
def persona_abc():
    return Persona.desde_api(
        {
            "_id": "abc123",
            "dni": "0102030405",
            "nombres": "Tony",
            "apellidos": "Stark",
            "fechaNacimiento": "1970-05-29T00:00:00.000Z",
            "genero": "M",
            "ciudad": "Quito",
        }
    )


@pytest.fixture
def api_falsa():
    return FakePersonaAPI()


@pytest.fixture
def api_en_vistas(monkeypatch, api_falsa):
    """Las vistas construyen PersonaAPI() por request; todas reciben la misma falsa."""
    monkeypatch.setattr("personas.views.PersonaAPI", lambda: api_falsa)
    return api_falsa


@pytest.fixture
def peter():
    return {
        "dni": "1234567890",
        "nombres": "Peter",
        "apellidos": "Parker",
        "fecha_nacimiento": "1995-08-10",
        "genero": "M",
        "ciudad": "Quito",
    }
