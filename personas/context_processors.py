# personas/context_processors.py
from django.conf import settings


def ui_flags(request):
    """
    Banderas para la UI:
      - ui_marca: texto de la cabecera
      - ui_banner_ok_ms: duración del aviso de éxito
    """
    return {
        "ui_marca": "MUNDO MARVEL",
        "ui_banner_ok_ms": settings.BANNER_OK_MS,
    }
