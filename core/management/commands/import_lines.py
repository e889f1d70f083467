"""
Import d'un document à lignes depuis un fichier JSON.

Le document est construit exactement comme dans l'interface : chaque
ligne est ajoutée puis renseignée champ par champ par l'éditeur de
lignes (valeurs converties sans erreur), et rattachée au catalogue du
client quand un modèle est indiqué. L'enregistrement passe par un
DocumentBinder dont le persister est le service du document.

Format du fichier :
    {
        "clientName": "ACME",
        "numero": "EXP-00042",
        "dateExport": "2024-03-01",
        "lines": [
            {"modele": "M-01", "quantity": "3", "unitPrice": "2,5"},
            {"modele": "M-02", "quantity": "", "isExcluded": true}
        ]
    }

Usage :
    python manage.py import_lines exports lignes.json --user moi@example.com --client <uuid>
"""

import json
from dataclasses import asdict

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.clients.services.client_model_service import ClientModelService
from apps.exports.services.export_service import ExportService
from apps.livraisons.services.livraison_service import LivraisonService
from core.exceptions import BaseAPIException
from core.lines import DocumentBinder, LineDocument, SubmissionError, export_editor, livraison_editor
from core.utils import parse_date

# Clés d'en-tête acceptées dans le fichier → champ du modèle
HEADER_KEYS = {
    'exports': {
        'numero': 'numero', 'lot': 'lot', 'notes': 'notes',
        'dateExport': 'date_export', 'date_export': 'date_export',
    },
    'livraisons': {
        'numero': 'numero', 'adresse': 'adresse', 'notes': 'notes',
        'dateLivraison': 'date_livraison', 'date_livraison': 'date_livraison',
    },
}
DATE_FIELDS = {'date_export', 'date_livraison'}

DOCUMENTS = {
    'exports':    (ExportService, export_editor),
    'livraisons': (LivraisonService, livraison_editor),
}


class Command(BaseCommand):
    help = "Importe une déclaration d'export ou une livraison depuis un fichier JSON."

    def add_arguments(self, parser):
        parser.add_argument('kind', choices=sorted(DOCUMENTS))
        parser.add_argument('path', help="Fichier JSON du document")
        parser.add_argument('--user', required=True, help="Email du propriétaire")
        parser.add_argument('--client', help="Identifiant du client (active le catalogue de modèles)")

    def handle(self, *args, **options):
        kind = options['kind']
        service, editor = DOCUMENTS[kind]

        user = self._get_user(options['user'])
        data = self._read(options['path'])

        client = None
        if options.get('client'):
            try:
                client = service.get_client(options['client'], user)
            except BaseAPIException as exc:
                raise CommandError(str(exc.detail))

        catalog = ClientModelService.catalog_for_client(client) if client and kind == 'exports' else []

        binder = DocumentBinder(LineDocument(
            client_name=data.get('clientName') or data.get('client_name') or '',
            header=self._header(kind, data),
        ))
        for raw in data.get('lines') or []:
            self._add_line(binder, editor, raw, catalog)

        def persist(document):
            try:
                return service.save(self._service_data(document, client), user)
            except BaseAPIException as exc:
                raise SubmissionError(str(exc.detail), status_code=exc.status_code)

        if not binder.submit(persist):
            raise CommandError(binder.error)

        saved = binder.saved_document
        self.stdout.write(self.style.SUCCESS(
            f"{kind} {saved.pk} enregistré ({len(binder.document.lines)} ligne(s))."
        ))

    # --------------------------------------------------------
    # LECTURE
    # --------------------------------------------------------

    @staticmethod
    def _get_user(email):
        try:
            return get_user_model().objects.get(email=email.lower())
        except get_user_model().DoesNotExist:
            raise CommandError(f"Utilisateur introuvable : {email}")

    @staticmethod
    def _read(path):
        try:
            with open(path, encoding='utf-8') as handle:
                data = json.load(handle)
        except OSError as exc:
            raise CommandError(f"Lecture impossible : {exc}")
        except json.JSONDecodeError as exc:
            raise CommandError(f"JSON invalide : {exc}")
        if not isinstance(data, dict):
            raise CommandError("Le fichier doit contenir un objet JSON.")
        lines = data.get('lines') or []
        if not isinstance(lines, list) or not all(isinstance(raw, dict) for raw in lines):
            raise CommandError("Chaque ligne doit être un objet JSON.")
        return data

    @staticmethod
    def _header(kind, data):
        header = {}
        for key, field in HEADER_KEYS[kind].items():
            if key in data:
                value = data[key]
                header[field] = parse_date(value) if field in DATE_FIELDS else value
        return header

    # --------------------------------------------------------
    # CONSTRUCTION DU DOCUMENT
    # --------------------------------------------------------

    @staticmethod
    def _add_line(binder, editor, raw, catalog):
        """
        Ajoute une ligne : modèle du catalogue d'abord, puis les valeurs
        du fichier, qui priment sur celles recopiées du catalogue.
        """
        document = binder.edit(editor.add_line)
        line_id = document.lines[-1].id

        if catalog and raw.get('modele'):
            binder.edit(editor.bind_model_by_id, line_id, raw['modele'], catalog)

        for field, value in raw.items():
            if field == 'id':
                continue
            binder.edit(editor.update_field_by_id, line_id, field, value)

    @staticmethod
    def _service_data(document, client):
        data = {
            'client_name': document.client_name,
            'lines': [asdict(line) for line in document.lines],
            **document.header,
        }
        if client is not None:
            data['client_id'] = client.id
        return data
