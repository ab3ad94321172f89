from dataclasses import dataclass, asdict, fields, replace

from django.db import models


class Genero(models.TextChoices):
    F = "F", "F"
    M = "M", "M"
    O = "O", "O"


class Ciudad(models.TextChoices):
    GUAYAQUIL = "Guayaquil", "Guayaquil"
    QUITO     = "Quito", "Quito"
    CUENCA    = "Cuenca", "Cuenca"
    MILAGRO   = "Milagro", "Milagro"
    MANTA     = "Manta", "Manta"
    LOJA      = "Loja", "Loja"


def truncar_fecha(valor) -> str:
    """'1995-08-10T00:00:00.000Z' -> '1995-08-10'."""
    if not valor:
        return ""
    return str(valor)[:10]


@dataclass
class Persona:
    """Copia local de un registro de la API. El id lo asigna el backend."""
    id:               str
    dni:              str = ""
    nombres:          str = ""
    apellidos:        str = ""
    fecha_nacimiento: str = ""
    genero:           str = ""
    ciudad:           str = ""

    @classmethod
    def desde_api(cls, datos: dict) -> "Persona":
        # El backend usa '_id' (Mongo); 'id' queda como respaldo
        ident = datos.get("_id") or datos.get("id") or ""
        return cls(
            id=str(ident),
            dni=datos.get("dni") or "",
            nombres=datos.get("nombres") or "",
            apellidos=datos.get("apellidos") or "",
            fecha_nacimiento=datos.get("fechaNacimiento") or "",
            genero=datos.get("genero") or "",
            ciudad=datos.get("ciudad") or "",
        )

    @property
    def fecha_corta(self) -> str:
        return truncar_fecha(self.fecha_nacimiento)

    def a_dict(self) -> dict:
        return asdict(self)

    def __str__(self):
        return f"{self.nombres} {self.apellidos} ({self.dni})"


@dataclass(frozen=True)
class Borrador:
    """Datos del formulario en edición (sin id)."""
    dni:              str = ""
    nombres:          str = ""
    apellidos:        str = ""
    fecha_nacimiento: str = ""
    genero:           str = Genero.F.value
    ciudad:           str = Ciudad.GUAYAQUIL.value

    @classmethod
    def campos(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def desde_persona(cls, persona: Persona) -> "Borrador":
        return cls(
            dni=persona.dni,
            nombres=persona.nombres,
            apellidos=persona.apellidos,
            fecha_nacimiento=persona.fecha_corta,
            genero=persona.genero,
            ciudad=persona.ciudad,
        )

    @classmethod
    def desde_dict(cls, datos: dict) -> "Borrador":
        conocidos = set(cls.campos())
        return cls(**{k: v for k, v in (datos or {}).items() if k in conocidos})

    def actualizar(self, campo: str, valor: str) -> "Borrador":
        """Devuelve un borrador nuevo con un solo campo cambiado."""
        if campo not in self.campos():
            raise KeyError(f"Campo desconocido: {campo}")
        return replace(self, **{campo: valor})

    def a_dict(self) -> dict:
        return asdict(self)

    def a_payload(self) -> dict:
        """Cuerpo JSON tal como lo espera la API (valores sin recortar)."""
        return {
            "dni": self.dni,
            "nombres": self.nombres,
            "apellidos": self.apellidos,
            "fechaNacimiento": self.fecha_nacimiento,
            "genero": self.genero,
            "ciudad": self.ciudad,
        }
