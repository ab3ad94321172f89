"""
Estado del formulario de registro.

Una instancia de FormularioRegistro representa la página de un usuario:
el borrador en edición, el id que se está editando, la última lista
traída de la API y los avisos (error / éxito). Vive en la sesión entre
requests (a_sesion / desde_sesion).
"""
import logging
import time

from django.conf import settings

from .api import PersonaAPIError
from .forms import validar_persona
from .models import Borrador, Persona

logger = logging.getLogger(__name__)

SESSION_KEY = "registro_personas"

MSG_CARGA = "No se pudo cargar la lista. Verifica que el backend esté corriendo."
MSG_GUARDADO = "Error en el guardado"
MSG_ELIMINADO = "Error al eliminar"
MSG_NO_ENCONTRADO = "Registro no encontrado"
MSG_CREADO = "Registro creado"
MSG_ACTUALIZADO = "Registro actualizado"


class FormularioRegistro:

    def __init__(self, api, reloj=time.time):
        self.api = api
        self.reloj = reloj
        self.borrador = Borrador()
        self.editando_id = None
        self.personas = []
        self.error = ""
        self.ok = ""
        self.ok_hasta = None

    # ---------- Avisos ----------
    def mostrar_error(self, mensaje):
        self.error = mensaje
        self.ok = ""
        self.ok_hasta = None

    def mostrar_ok(self, mensaje):
        # Un aviso nuevo reemplaza al anterior y a su vencimiento
        self.ok = mensaje
        self.ok_hasta = self.reloj() + settings.BANNER_OK_MS / 1000.0

    def ok_vigente(self):
        if self.ok and self.ok_hasta is not None and self.reloj() >= self.ok_hasta:
            self.ok = ""
            self.ok_hasta = None
        return self.ok

    def ok_restante_ms(self):
        if not self.ok_vigente():
            return 0
        return max(0, int(round((self.ok_hasta - self.reloj()) * 1000)))

    # ---------- Operaciones ----------
    def cargar(self):
        """Reemplaza la lista completa. Si falla, se conserva la anterior."""
        try:
            self.personas = self.api.listar()
        except PersonaAPIError:
            logger.warning("No se pudo cargar la lista de personas")
            self.error = MSG_CARGA
            return False
        return True

    def guardar(self, borrador: Borrador):
        self.borrador = borrador
        msg = validar_persona(borrador)
        if msg:
            self.mostrar_error(msg)
            return False
        self.error = ""

        editando = self.editando_id
        try:
            if editando:
                self.api.actualizar(editando, borrador)
            else:
                self.api.crear(borrador)
        except PersonaAPIError as exc:
            logger.info("Guardado rechazado (status=%s)", exc.status)
            self.mostrar_error(exc.mensaje or MSG_GUARDADO)
            return False

        self.cargar()
        self.borrador = Borrador()
        self.editando_id = None
        self.mostrar_ok(MSG_ACTUALIZADO if editando else MSG_CREADO)
        return True

    def editar(self, persona: Persona):
        self.borrador = Borrador.desde_persona(persona)
        self.editando_id = persona.id

    def cancelar(self):
        self.borrador = Borrador()
        self.editando_id = None
        self.error = ""
        self.ok = ""
        self.ok_hasta = None

    def eliminar(self, persona_id, confirmar):
        """
        confirmar: callable sin argumentos; si devuelve False no se hace nada.
        Tras pedir el borrado se recarga la lista, haya fallado o no.
        """
        if not confirmar():
            return False
        self.error = ""
        borrado = True
        try:
            self.api.eliminar(persona_id)
        except PersonaAPIError as exc:
            logger.info("Borrado de %s rechazado (status=%s)", persona_id, exc.status)
            self.mostrar_error(exc.mensaje or MSG_ELIMINADO)
            borrado = False
        self.cargar()
        return borrado

    def buscar(self, persona_id):
        for p in self.personas:
            if p.id == persona_id:
                return p
        return None

    # ---------- Sesión ----------
    def a_sesion(self) -> dict:
        return {
            "borrador": self.borrador.a_dict(),
            "editando_id": self.editando_id,
            "personas": [p.a_dict() for p in self.personas],
            "error": self.error,
            "ok": self.ok,
            "ok_hasta": self.ok_hasta,
        }

    @classmethod
    def desde_sesion(cls, datos, api, reloj=time.time):
        estado = cls(api, reloj=reloj)
        if not datos:
            return estado
        estado.borrador = Borrador.desde_dict(datos.get("borrador"))
        estado.editando_id = datos.get("editando_id")
        estado.personas = [Persona(**p) for p in datos.get("personas") or []]
        estado.error = datos.get("error") or ""
        estado.ok = datos.get("ok") or ""
        estado.ok_hasta = datos.get("ok_hasta")
        return estado
