import pytest
from django.urls import reverse

from personas.estado import MSG_CARGA, MSG_NO_ENCONTRADO


@pytest.fixture
def api(api_en_vistas, persona_abc):
    api_en_vistas.personas = [persona_abc]
    return api_en_vistas


def _montar(client, api):
    response = client.get(reverse("registro"))
    assert response.status_code == 200
    api.llamadas.clear()
    return response


def test_montar_carga_la_lista(client, api):
    response = client.get(reverse("registro"))
    assert response.status_code == 200
    assert api.metodos() == ["listar"]
    contenido = response.content.decode()
    assert "Nuevo registro" in contenido
    assert "Guardar" in contenido
    assert "Stark" in contenido
    assert "1970-05-29" in contenido
    assert "1970-05-29T" not in contenido
    assert "Cancelar" not in contenido


def test_lista_vacia(client, api_en_vistas):
    response = client.get(reverse("registro"))
    assert "No hay registros todavía." in response.content.decode()


def test_montar_con_backend_caido(client, api):
    api.fallar("listar")
    response = client.get(reverse("registro"))
    assert response.status_code == 200
    assert MSG_CARGA in response.content.decode()


def test_crear_peter_parker(client, api, peter):
    _montar(client, api)
    response = client.post(reverse("personas_guardar"), peter)
    assert response.status_code == 302
    assert api.llamadas == [
        (
            "crear",
            {
                "dni": "1234567890",
                "nombres": "Peter",
                "apellidos": "Parker",
                "fechaNacimiento": "1995-08-10",
                "genero": "M",
                "ciudad": "Quito",
            },
        ),
        ("listar",),
    ]

    response = client.get(response.url)
    # la redirección muestra lo que dejó la acción, sin otra carga
    assert api.metodos() == ["crear", "listar"]
    contenido = response.content.decode()
    assert "Registro creado" in contenido
    assert "Parker" in contenido
    assert response.context["form"].initial["dni"] == ""


def test_dni_corto_no_llega_a_la_api(client, api, peter):
    _montar(client, api)
    response = client.post(reverse("personas_guardar"), dict(peter, dni="12345"), follow=True)
    assert api.llamadas == []
    contenido = response.content.decode()
    assert "DNI debe tener 10 dígitos" in contenido
    assert response.context["form"].initial["dni"] == "12345"


def test_editar_actualizar(client, api):
    _montar(client, api)
    response = client.post(reverse("personas_editar", args=["abc123"]))
    assert response.status_code == 302
    assert response.url.endswith("#formulario")
    assert api.llamadas == []

    response = client.get(reverse("registro"))
    assert api.llamadas == []
    contenido = response.content.decode()
    assert "Editar registro" in contenido
    assert "Actualizar" in contenido
    assert "Cancelar" in contenido
    inicial = response.context["form"].initial
    assert inicial["nombres"] == "Tony"
    assert inicial["fecha_nacimiento"] == "1970-05-29"

    datos = dict(inicial, ciudad="Loja")
    response = client.post(reverse("personas_guardar"), datos, follow=True)
    assert api.llamadas[0][:2] == ("actualizar", "abc123")
    assert api.llamadas[0][2]["ciudad"] == "Loja"
    assert api.metodos() == ["actualizar", "listar"]
    contenido = response.content.decode()
    assert "Registro actualizado" in contenido
    assert "Nuevo registro" in contenido


def test_editar_y_cancelar(client, api):
    _montar(client, api)
    client.post(reverse("personas_editar", args=["abc123"]))
    response = client.post(reverse("personas_cancelar"), follow=True)
    assert api.llamadas == []
    assert "Nuevo registro" in response.content.decode()
    assert response.context["form"].initial["dni"] == ""


def test_editar_registro_desconocido(client, api):
    _montar(client, api)
    response = client.post(reverse("personas_editar", args=["nope"]), follow=True)
    assert api.llamadas == []
    assert MSG_NO_ENCONTRADO in response.content.decode()


def test_error_del_servidor_se_muestra(client, api, peter):
    _montar(client, api)
    api.fallar("crear", mensaje="DNI ya registrado", status=409)
    response = client.post(reverse("personas_guardar"), peter, follow=True)
    assert "DNI ya registrado" in response.content.decode()
    assert response.context["form"].initial["nombres"] == "Peter"


def test_eliminar_confirmado(client, api):
    _montar(client, api)
    response = client.post(reverse("personas_eliminar", args=["abc123"]), {"confirmado": "1"}, follow=True)
    assert api.llamadas == [("eliminar", "abc123"), ("listar",)]
    assert "No hay registros todavía." in response.content.decode()


def test_eliminar_sin_confirmar(client, api):
    _montar(client, api)
    client.post(reverse("personas_eliminar", args=["abc123"]))
    assert api.llamadas == []


def test_recargar_la_pagina_vuelve_a_montar(client, api):
    _montar(client, api)
    client.post(reverse("personas_editar", args=["abc123"]), follow=True)
    response = client.get(reverse("registro"))
    assert api.metodos() == ["listar"]
    assert "Nuevo registro" in response.content.decode()


@pytest.mark.parametrize("nombre", ["personas_guardar", "personas_cancelar"])
def test_acciones_solo_por_post(client, api, nombre):
    assert client.get(reverse(nombre)).status_code == 405


def test_pagina_solo_por_get(client, api):
    assert client.post(reverse("registro")).status_code == 405


def test_cancelar_no_pasa_por_la_validacion_del_navegador(client, api):
    _montar(client, api)
    response = client.post(reverse("personas_editar", args=["abc123"]), follow=True)
    contenido = response.content.decode()
    boton = next(linea for linea in contenido.splitlines() if ">Cancelar</button>" in linea)
    assert "formnovalidate" in boton
    assert reverse("personas_cancelar") in boton


def test_formulario_de_borrado_no_viene_confirmado(client, api):
    contenido = client.get(reverse("registro")).content.decode()
    assert 'name="confirmado" value=""' in contenido
    assert 'name="confirmado" value="1"' not in contenido


def test_enviar_el_borrado_tal_como_se_renderiza_no_elimina(client, api):
    _montar(client, api)
    # sin JS el campo llega vacío
    client.post(reverse("personas_eliminar", args=["abc123"]), {"confirmado": ""})
    assert api.llamadas == []
