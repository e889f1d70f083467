"""
Liaison document parent ↔ éditeurs.

Le DocumentBinder détient LA version courante du document en cours
d'édition. Les éditeurs (lignes, en-tête) ne modifient rien eux-mêmes :
ils renvoient un nouveau document que le binder remplace d'un bloc.
Un abonné ne voit donc jamais une ligne à moitié mise à jour.

Cycle de vie d'une session d'édition :

    EMPTY ──load()──▶ LOADED ──édition──▶ DIRTY ──submit()──▶ SUBMITTING
                                            ▲                    │
                                            │        ┌───────────┴──────────┐
                                            │        ▼                      ▼
                                            └──── FAILED                  SAVED
                                          (édition suivante)    (load() / clear())

Un échec de sauvegarde ne perd AUCUNE saisie : le document reste en
place, l'erreur est exposée dans `binder.error`.

Usage :
    binder = DocumentBinder()
    binder.subscribe(lambda doc: print(len(doc.lines)))
    binder.load(LineDocument(client_name='ACME'))
    binder.edit(export_editor.add_line)
    binder.edit(export_editor.update_field, 0, 'quantity', '12')
    if not binder.submit(persister):
        print(binder.error)
"""

import logging

from .items import LineDocument

logger = logging.getLogger('gestexport.lines')


GENERIC_ERROR_MESSAGE = "Une erreur inattendue est survenue lors de l'enregistrement."


class SubmissionError(Exception):
    """
    Échec d'enregistrement attendu (réseau, refus du serveur, validation).
    Le message est affiché tel quel à l'utilisateur.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SubmissionInProgress(SubmissionError):
    """Une sauvegarde est déjà en cours pour ce document."""

    def __init__(self):
        super().__init__("Un enregistrement est déjà en cours.")


class DocumentBinder:

    EMPTY      = 'empty'
    LOADED     = 'loaded'
    DIRTY      = 'dirty'
    SUBMITTING = 'submitting'
    SAVED      = 'saved'
    FAILED     = 'failed'

    def __init__(self, document=None):
        self._subscribers = []
        self.document = None
        self.state = self.EMPTY
        self.error = None
        self.saved_document = None
        if document is not None:
            self.load(document)

    # --------------------------------------------------------
    # ABONNEMENTS
    # --------------------------------------------------------

    def subscribe(self, callback):
        """
        Enregistre `callback(document)`, appelé après chaque remplacement.
        Retourne une fonction de désabonnement.
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._subscribers):
            callback(self.document)

    # --------------------------------------------------------
    # CHARGEMENT / ÉDITION
    # --------------------------------------------------------

    def load(self, document):
        self.document = document
        self.state = self.LOADED
        self.error = None
        self._notify()

    def clear(self):
        self.document = None
        self.state = self.EMPTY
        self.error = None
        self._notify()

    def set_document(self, document):
        """
        Remplace le document complet (setter exposé aux éditeurs).
        Refusé pendant une sauvegarde.
        """
        if self.state == self.SUBMITTING:
            raise SubmissionInProgress()
        self.document = document
        self.state = self.DIRTY
        self.error = None
        self._notify()

    def edit(self, operation, *args, **kwargs):
        """Applique `operation(document, *args)` et remplace le document par le résultat."""
        self.set_document(operation(self.document, *args, **kwargs))
        return self.document

    @property
    def is_dirty(self):
        return self.state in (self.DIRTY, self.FAILED)

    # --------------------------------------------------------
    # ENREGISTREMENT
    # --------------------------------------------------------

    def submit(self, persister) -> bool:
        """
        Transmet le document à `persister(document)`.

        Le persister retourne le document enregistré (ou None). Un
        LineDocument retourné remplace le document courant, de sorte qu'une
        nouvelle soumission après édition vise le document déjà créé et lève
        SubmissionError pour un échec attendu. Toute autre exception est
        journalisée et remplacée par un message générique.
        Aucune nouvelle tentative automatique.

        Returns:
            bool : True si enregistré, False sinon (voir self.error)
        """
        if self.state == self.SUBMITTING:
            raise SubmissionInProgress()
        if self.document is None:
            self.state = self.FAILED
            self.error = "Aucun document à enregistrer."
            return False

        self.state = self.SUBMITTING
        self.error = None
        try:
            saved = persister(self.document)
        except SubmissionError as exc:
            logger.warning("Échec d'enregistrement du document %s : %s", self.document.id, exc.message)
            self.state = self.FAILED
            self.error = exc.message
            return False
        except Exception:
            logger.exception("Erreur inattendue à l'enregistrement du document %s", self.document.id)
            self.state = self.FAILED
            self.error = GENERIC_ERROR_MESSAGE
            return False

        self.state = self.SAVED
        if isinstance(saved, LineDocument):
            # Le document enregistré (identifiant attribué) devient la version courante
            self.document = saved
            self._notify()
        self.saved_document = saved if saved is not None else self.document
        return True
