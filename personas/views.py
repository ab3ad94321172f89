from django.shortcuts import render, redirect
from django.urls import reverse
from django.views.decorators.http import require_http_methods

from .api import PersonaAPI
from .estado import FormularioRegistro, SESSION_KEY, MSG_NO_ENCONTRADO
from .forms import PersonaForm

# Marca que deja una acción para que el siguiente GET reutilice el estado
# guardado en vez de montar la página desde cero.
CONSERVAR_KEY = "registro_personas_conservar"


# ---------- Utilidades de sesión ----------
def _get_api():
    return PersonaAPI()


def _estado_de_sesion(request):
    return FormularioRegistro.desde_sesion(request.session.get(SESSION_KEY), _get_api())


def _persistir(request, estado, conservar):
    request.session[SESSION_KEY] = estado.a_sesion()
    if conservar:
        request.session[CONSERVAR_KEY] = True
    else:
        request.session.pop(CONSERVAR_KEY, None)


def _volver(request, estado, ancla=None):
    _persistir(request, estado, conservar=True)
    url = reverse("registro")
    if ancla:
        url = f"{url}#{ancla}"
    return redirect(url)


# ---------- Página ----------
@require_http_methods(["GET"])
def registro_view(request):
    """
    Un GET sin marca equivale a montar la página: estado nuevo y lista recargada.
    Tras una acción se muestra lo que la acción dejó, sin volver a pedir la lista.
    """
    if request.session.get(CONSERVAR_KEY):
        estado = _estado_de_sesion(request)
    else:
        estado = FormularioRegistro(_get_api())
        estado.cargar()

    ok = estado.ok_vigente()
    contexto = {
        "form": PersonaForm(initial=estado.borrador.a_dict()),
        "personas": estado.personas,
        "editando": bool(estado.editando_id),
        "error": estado.error,
        "ok": ok,
        "ok_ms": estado.ok_restante_ms(),
    }
    _persistir(request, estado, conservar=False)
    return render(request, "personas/registro.html", contexto)


# ---------- Acciones ----------
@require_http_methods(["POST"])
def guardar_view(request):
    estado = _estado_de_sesion(request)
    form = PersonaForm(request.POST)
    if form.is_valid():
        estado.guardar(form.borrador())
    else:
        estado.borrador = form.borrador()
        estado.mostrar_error(form.primer_error())
    return _volver(request, estado)


@require_http_methods(["POST"])
def editar_view(request, persona_id):
    estado = _estado_de_sesion(request)
    persona = estado.buscar(persona_id)
    if persona is None:
        estado.mostrar_error(MSG_NO_ENCONTRADO)
    else:
        estado.editar(persona)
    return _volver(request, estado, ancla="formulario")


@require_http_methods(["POST"])
def cancelar_view(request):
    estado = _estado_de_sesion(request)
    estado.cancelar()
    return _volver(request, estado)


@require_http_methods(["POST"])
def eliminar_view(request, persona_id):
    """
    La confirmación la pide el navegador (confirm() antes de enviar);
    el formulario sólo llega con confirmado=1 si el usuario aceptó.
    """
    estado = _estado_de_sesion(request)
    estado.eliminar(persona_id, confirmar=lambda: request.POST.get("confirmado") == "1")
    return _volver(request, estado)
