# sembrar_personas.py
from django.core.management.base import BaseCommand, CommandError

from personas.api import PersonaAPI, PersonaAPIError
from personas.forms import validar_persona
from personas.models import Borrador

PERSONAS_DEMO = [
    Borrador(dni="1234567890", nombres="Peter", apellidos="Parker",
             fecha_nacimiento="1995-08-10", genero="M", ciudad="Quito"),
    Borrador(dni="0987654321", nombres="Natasha", apellidos="Romanoff",
             fecha_nacimiento="1984-11-22", genero="F", ciudad="Guayaquil"),
    Borrador(dni="1122334455", nombres="Wanda", apellidos="Maximoff",
             fecha_nacimiento="1989-02-10", genero="F", ciudad="Cuenca"),
    Borrador(dni="5566778899", nombres="Steve", apellidos="Rogers",
             fecha_nacimiento="1918-07-04", genero="M", ciudad="Loja"),
]


class Command(BaseCommand):
    help = "Crea personas de ejemplo en la API (si su DNI no existe todavía)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Sólo informa qué se crearía.",
        )
        parser.add_argument("--api-url", help="URL base de la API (por defecto PERSONAS_API_URL).")

    def handle(self, *args, **options):
        api = PersonaAPI(base_url=options.get("api_url"))
        try:
            existentes = {p.dni for p in api.listar()}
        except PersonaAPIError as exc:
            raise CommandError(f"No se pudo leer la lista: {exc}") from exc

        creados = 0
        for borrador in PERSONAS_DEMO:
            if borrador.dni in existentes:
                self.stdout.write(f"Ya existe: {borrador.dni}")
                continue
            msg = validar_persona(borrador)
            if msg:
                self.stdout.write(self.style.WARNING(f"Omitido {borrador.dni}: {msg}"))
                continue
            if options["dry_run"]:
                self.stdout.write(f"Se crearía: {borrador.nombres} {borrador.apellidos}")
                continue
            try:
                api.crear(borrador)
            except PersonaAPIError as exc:
                self.stdout.write(self.style.ERROR(f"Error con {borrador.dni}: {exc}"))
                continue
            creados += 1
            self.stdout.write(self.style.SUCCESS(f"Creado: {borrador.nombres} {borrador.apellidos}"))
        self.stdout.write(self.style.SUCCESS(f"Listo. Personas nuevas: {creados}"))
