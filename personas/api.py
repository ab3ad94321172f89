import logging

import requests
from django.conf import settings

from .models import Borrador, Persona

logger = logging.getLogger(__name__)

COLECCION = "/api/personas"


class PersonaAPIError(Exception):
    """
    Falla al hablar con la API de personas.
    - status: código HTTP (None si no hubo respuesta)
    - mensaje: campo 'message' del cuerpo de error, si vino
    """

    def __init__(self, mensaje=None, status=None):
        self.mensaje = mensaje
        self.status = status
        super().__init__(mensaje or f"Error de la API de personas (status={status})")


class PersonaAPI:
    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or settings.PERSONAS_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PERSONAS_API_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, persona_id=None):
        if persona_id is None:
            return f"{self.base_url}{COLECCION}"
        return f"{self.base_url}{COLECCION}/{persona_id}"

    def _request(self, method: str, url: str, **kwargs):
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as exc:
            logger.warning("%s %s sin respuesta: %s", method, url, exc)
            raise PersonaAPIError() from exc

        logger.info("%s %s -> %s", method, url, response.status_code)
        if not response.ok:
            raise PersonaAPIError(_mensaje_de_error(response), status=response.status_code)
        return response

    def listar(self):
        """
        GET /api/personas
        Returns:
            list[Persona]
        Raises:
            PersonaAPIError: status no 2xx, sin conexión o cuerpo que no es una lista
        """
        response = self._request("GET", self._url())
        try:
            data = response.json()
        except ValueError as exc:
            raise PersonaAPIError(status=response.status_code) from exc
        if not isinstance(data, list):
            raise PersonaAPIError(status=response.status_code)
        return [Persona.desde_api(item) for item in data if isinstance(item, dict)]

    def crear(self, borrador: Borrador):
        """POST /api/personas. Devuelve la Persona creada si el cuerpo la trae."""
        response = self._request("POST", self._url(), json=borrador.a_payload())
        try:
            data = response.json()
        except ValueError:
            return None
        return Persona.desde_api(data) if isinstance(data, dict) else None

    def actualizar(self, persona_id: str, borrador: Borrador):
        self._request("PUT", self._url(persona_id), json=borrador.a_payload())

    def eliminar(self, persona_id: str):
        self._request("DELETE", self._url(persona_id))


def _mensaje_de_error(response):
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        return payload.get("message") or None
    return None
