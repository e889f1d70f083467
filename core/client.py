"""
Client HTTP de l'API GestExport.

Utilisé par les outils hors navigateur (scripts d'import, postes de
saisie) pour charger un document, l'éditer avec core.lines puis le
renvoyer au serveur via un DocumentBinder.

Toute erreur est convertie en SubmissionError portant un message
affichable :
- délai dépassé / serveur injoignable → message réseau
- réponse non 2xx                    → champ `error` du corps JSON, tel quel

Usage :
    client = GestExportClient('https://gestexport.local', token)
    document = client.fetch_document('exports', export_id)
    binder = DocumentBinder(document)
    binder.edit(export_editor.update_field, 0, 'quantity', '12')
    binder.submit(client.persister('exports'))
"""

import json
import logging

import requests
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder

from .constants import DEFAULT_HTTP_TIMEOUT
from .lines import CatalogEntry, ExportLine, LineDocument, LivraisonLine, SubmissionError

logger = logging.getLogger('gestexport')


DOCUMENT_KINDS = {
    'exports':    ExportLine,
    'livraisons': LivraisonLine,
}

TIMEOUT_MESSAGE    = "Le serveur n'a pas répondu à temps (délai dépassé)."
CONNECTION_MESSAGE = "Impossible de joindre le serveur."


class GestExportClient:

    def __init__(self, base_url: str, token: str = None, timeout: int = None, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout or getattr(settings, 'GESTEXPORT_HTTP_TIMEOUT', DEFAULT_HTTP_TIMEOUT)
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept':       'application/json',
            'Content-Type': 'application/json',
        })
        if token:
            self.session.headers['Authorization'] = f'Bearer {token}'

    # --------------------------------------------------------
    # DOCUMENTS
    # --------------------------------------------------------

    def fetch_document(self, kind: str, document_id) -> LineDocument:
        line_class = self._line_class(kind)
        data = self._request('GET', f'{kind}/{document_id}/')
        return LineDocument.from_dict(data, line_class=line_class)

    def save_document(self, kind: str, document: LineDocument) -> LineDocument:
        """POST pour un nouveau document, PUT sinon. Retourne la version du serveur."""
        line_class = self._line_class(kind)
        payload = json.dumps(document.to_dict(), cls=DjangoJSONEncoder)
        if document.id:
            data = self._request('PUT', f'{kind}/{document.id}/', data=payload)
        else:
            data = self._request('POST', f'{kind}/', data=payload)
        return LineDocument.from_dict(data, line_class=line_class)

    def delete_document(self, kind: str, document_id) -> None:
        self._line_class(kind)
        self._request('DELETE', f'{kind}/{document_id}/')

    def persister(self, kind: str):
        """Retourne un persister utilisable par DocumentBinder.submit()."""
        self._line_class(kind)

        def persist(document):
            return self.save_document(kind, document)

        return persist

    # --------------------------------------------------------
    # CATALOGUE
    # --------------------------------------------------------

    def fetch_catalog(self, client_id) -> list:
        """Modèles d'un client, prêts pour ExportLineEditor.bind_model()."""
        data = self._request('GET', f'clients/{client_id}/models/')
        return [CatalogEntry.from_source(item) for item in data or []]

    # --------------------------------------------------------
    # TRANSPORT
    # --------------------------------------------------------

    @staticmethod
    def _line_class(kind):
        try:
            return DOCUMENT_KINDS[kind]
        except KeyError:
            raise ValueError(f"Type de document inconnu : {kind}") from None

    def _request(self, method, path, **kwargs):
        url = f'{self.base_url}/api/v1/{path}'
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout:
            logger.warning(f"{method} {url} : délai dépassé ({self.timeout}s)")
            raise SubmissionError(TIMEOUT_MESSAGE) from None
        except requests.ConnectionError as exc:
            logger.warning(f"{method} {url} : connexion impossible ({exc})")
            raise SubmissionError(CONNECTION_MESSAGE) from None

        if not response.ok:
            raise SubmissionError(self._error_message(response), status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_message(response):
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get('error'), str):
            return body['error']
        return f"Erreur serveur ({response.status_code})."
