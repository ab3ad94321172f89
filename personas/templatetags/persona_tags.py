# personas/templatetags/persona_tags.py
from django import template

from personas.models import truncar_fecha

register = template.Library()


@register.filter
def fecha_corta(valor) -> str:
    """Sólo la parte de fecha de un valor ISO ('1995-08-10T05:00:00Z' -> '1995-08-10')."""
    return truncar_fecha(valor)
