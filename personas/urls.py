from django.urls import path

from .views import *

urlpatterns = [
    path("", registro_view, name="registro"),

    # Acciones del formulario
    path("guardar/", guardar_view, name="personas_guardar"),
    path("cancelar/", cancelar_view, name="personas_cancelar"),
    path("<str:persona_id>/editar/", editar_view, name="personas_editar"),
    path("<str:persona_id>/eliminar/", eliminar_view, name="personas_eliminar"),
]
