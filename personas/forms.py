# personas/forms.py
import re
from datetime import date

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .models import Borrador, Ciudad, Genero

DNI_RE = re.compile(r"[0-9]{10}")
FECHA_MINIMA = date(1900, 1, 1)

MSG_DNI = "DNI debe tener 10 dígitos"
MSG_NOMBRES = "Nombres mínimos 2 caracteres"
MSG_APELLIDOS = "Apellidos mínimos 2 caracteres"
MSG_FECHA_VACIA = "Selecciona fecha"
MSG_FECHA_RANGO = "Fecha fuera de rango"


def parse_fecha(valor):
    """Acepta 'YYYY-MM-DD' o un datetime ISO. Devuelve date o None."""
    valor = (valor or "").strip()
    if not valor:
        return None
    try:
        fecha = parse_date(valor)
        if fecha:
            return fecha
        dt = parse_datetime(valor.replace("Z", "+00:00"))
    except ValueError:
        # bien formada pero inexistente (p.ej. 2023-02-30)
        return None
    return dt.date() if dt else None


def validar_persona(borrador: Borrador, hoy=None) -> str:
    """
    Devuelve el primer mensaje de error, o "" si el borrador es válido.
    El orden de las reglas es fijo.
    """
    if not DNI_RE.fullmatch(borrador.dni or ""):
        return MSG_DNI
    if len((borrador.nombres or "").strip()) < 2:
        return MSG_NOMBRES
    if len((borrador.apellidos or "").strip()) < 2:
        return MSG_APELLIDOS

    fecha = parse_fecha(borrador.fecha_nacimiento)
    if fecha is None:
        return MSG_FECHA_VACIA
    hoy = hoy or timezone.localdate()
    if fecha < FECHA_MINIMA or fecha > hoy:
        return MSG_FECHA_RANGO
    return ""


class PersonaForm(forms.Form):
    dni = forms.CharField(
        label="DNI",
        required=False,
        strip=False,
        widget=forms.TextInput(
            attrs={"class": "form-control", "placeholder": "10 dígitos", "pattern": r"\d{10}"}
        ),
    )
    nombres = forms.CharField(
        label="Nombres",
        required=False,
        strip=False,
        widget=forms.TextInput(
            attrs={"class": "form-control", "placeholder": "Ej: Peter"}
        ),
    )
    apellidos = forms.CharField(
        label="Apellidos",
        required=False,
        strip=False,
        widget=forms.TextInput(
            attrs={"class": "form-control", "placeholder": "Ej: Parker"}
        ),
    )
    fecha_nacimiento = forms.CharField(
        label="Fecha de nacimiento",
        required=False,
        widget=forms.DateInput(format="%Y-%m-%d", attrs={"class": "form-control", "type": "date"}),
    )
    genero = forms.ChoiceField(
        label="Género",
        choices=Genero.choices,
        initial=Genero.F,
        widget=forms.RadioSelect(attrs={"class": "radio"}),
    )
    ciudad = forms.ChoiceField(
        label="Ciudad",
        choices=Ciudad.choices,
        initial=Ciudad.GUAYAQUIL,
        widget=forms.Select(attrs={"class": "form-select"}),
    )

    def clean(self):
        cleaned_data = super().clean()
        msg = validar_persona(self.borrador())
        if msg:
            raise ValidationError(msg)
        return cleaned_data

    def borrador(self) -> Borrador:
        """Lo que el usuario escribió, sin limpiar (para volver a mostrarlo)."""
        defaults = Borrador()
        valores = {}
        for campo in Borrador.campos():
            valores[campo] = self.data.get(campo, getattr(defaults, campo))
        return Borrador(**valores)

    def primer_error(self) -> str:
        """Un único mensaje: primero el de validación, luego el del primer campo."""
        generales = self.non_field_errors()
        if generales:
            return generales[0]
        for name in self.fields:
            if name in self.errors:
                return self.errors[name][0]
        return ""
