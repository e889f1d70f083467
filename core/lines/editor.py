"""
Éditeur de collection de lignes, partagé par les déclarations d'export
et les livraisons.

Contrat :
    À partir d'un document et d'un événement d'édition, produire un
    NOUVEAU document où exactement une ligne est remplacée (ou une ligne
    ajoutée / retirée). Les autres lignes sont conservées à l'identique,
    dans le même ordre.

Règles :
- Toutes les opérations sont pures : le document reçu n'est jamais modifié.
- Aucune opération ne lève d'exception. Un index hors limites ou un champ
  inconnu renvoie le document inchangé (et laisse une trace dans les logs).
- Les quantités / prix invalides deviennent 0 (voir coercion.py).

Usage :
    doc = LineDocument(id='42', client_name='ACME')
    doc = export_editor.add_line(doc)
    doc = export_editor.update_field(doc, 0, 'quantity', '3')
    doc = export_editor.update_field(doc, 0, 'unitPrice', '2.5')
    export_editor.line_amount(doc.lines[0])   # → Decimal('7.50')
"""

import logging
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable, Optional

from .items import CatalogEntry, ExportLine, LineDocument, LineItem, LivraisonLine

logger = logging.getLogger('gestexport.lines')

CENT = Decimal('0.01')

# Calculs de montants exacts, quelle que soit la taille des saisies
AMOUNT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


class LineCollectionEditor:
    """Opérations communes à toutes les variantes de lignes."""

    def __init__(self, line_class=LineItem):
        self.line_class = line_class

    # --------------------------------------------------------
    # AJOUT / SUPPRESSION
    # --------------------------------------------------------

    def add_line(self, document: LineDocument) -> LineDocument:
        """Ajoute une ligne par défaut en fin de collection."""
        line = self.line_class.blank(parent_id=document.id)
        return document.with_lines(document.lines + (line,))

    def remove_line(self, document: LineDocument, index: int) -> LineDocument:
        """
        Retire la ligne à `index`. Les lignes suivantes sont décalées :
        un index n'est pas une référence stable après une suppression.
        """
        if not self._in_range(document, index):
            logger.debug("remove_line : index %s hors limites (%s lignes)", index, len(document.lines))
            return document
        return document.with_lines(document.lines[:index] + document.lines[index + 1:])

    # --------------------------------------------------------
    # ÉDITION D'UN CHAMP
    # --------------------------------------------------------

    def update_field(self, document: LineDocument, index: int, field: str, raw_value) -> LineDocument:
        """
        Remplace un champ de la ligne `index` par `raw_value` converti.

        `field` accepte le nom d'attribut ('unit_price') ou la clé JSON
        ('unitPrice').
        """
        name = self.line_class.resolve_field(field)
        if name is None:
            logger.warning("update_field : champ inconnu '%s' pour %s", field, self.line_class.__name__)
            return document
        if not self._in_range(document, index):
            logger.debug("update_field : index %s hors limites (%s lignes)", index, len(document.lines))
            return document

        return self._replace_line(document, index, document.lines[index].with_value(name, raw_value))

    # --------------------------------------------------------
    # ADRESSAGE PAR IDENTIFIANT
    # --------------------------------------------------------

    def index_of(self, document: LineDocument, line_id: str) -> Optional[int]:
        for index, line in enumerate(document.lines):
            if line.id == line_id:
                return index
        return None

    def update_field_by_id(self, document, line_id, field, raw_value):
        index = self.index_of(document, line_id)
        if index is None:
            return document
        return self.update_field(document, index, field, raw_value)

    def remove_line_by_id(self, document, line_id):
        index = self.index_of(document, line_id)
        if index is None:
            return document
        return self.remove_line(document, index)

    # --------------------------------------------------------
    # AGRÉGATS
    # --------------------------------------------------------

    def total_quantity(self, document: LineDocument) -> int:
        return sum(line.quantity for line in document.lines)

    # --------------------------------------------------------
    # MÉTHODES PRIVÉES
    # --------------------------------------------------------

    @staticmethod
    def _in_range(document, index) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(document.lines)

    @staticmethod
    def _replace_line(document, index, line):
        lines = document.lines
        return document.with_lines(lines[:index] + (line,) + lines[index + 1:])


class ExportLineEditor(LineCollectionEditor):
    """
    Lignes de déclaration d'export : ajoute le rattachement au catalogue
    des modèles client, les montants et le total.
    """

    def __init__(self):
        super().__init__(ExportLine)

    def bind_model(self, document: LineDocument, index: int, model_name: str,
                   catalog: Iterable) -> LineDocument:
        """
        Sélectionne un modèle du catalogue pour la ligne `index`.

        Correspondance exacte sur le nom. Trouvé : `commande` et
        `description` sont ÉCRASÉES par celles du modèle (les saisies
        manuelles sont perdues). Non trouvé : les deux champs sont vidés.
        Quantité, prix et exclusion ne changent pas.
        """
        if not self._in_range(document, index):
            logger.debug("bind_model : index %s hors limites (%s lignes)", index, len(document.lines))
            return document

        model_name = model_name or ''
        selected = self.find_model(model_name, catalog)
        if selected is None and model_name:
            logger.debug("bind_model : modèle '%s' absent du catalogue", model_name)

        line = document.lines[index]
        line = line.with_value('modele', model_name)
        line = line.with_value('commande', selected.commandes if selected else '')
        line = line.with_value('description', selected.description if selected else '')
        return self._replace_line(document, index, line)

    def bind_model_by_id(self, document, line_id, model_name, catalog):
        index = self.index_of(document, line_id)
        if index is None:
            return document
        return self.bind_model(document, index, model_name, catalog)

    @staticmethod
    def find_model(model_name: str, catalog: Iterable) -> Optional[CatalogEntry]:
        for source in catalog or ():
            entry = CatalogEntry.from_source(source)
            if entry.name == model_name:
                return entry
        return None

    # --------------------------------------------------------
    # MONTANTS
    # --------------------------------------------------------

    @staticmethod
    def line_amount(line) -> Decimal:
        """Montant HT de la ligne : quantité × prix unitaire, arrondi au centime."""
        with localcontext(AMOUNT_CONTEXT):
            return (Decimal(line.quantity) * line.unit_price).quantize(CENT, rounding=ROUND_HALF_UP)

    def total(self, document: LineDocument) -> Decimal:
        """Somme des montants des lignes NON exclues. Les lignes exclues restent dans le document."""
        with localcontext(AMOUNT_CONTEXT):
            total = sum(
                (self.line_amount(line) for line in document.lines if not line.is_excluded),
                Decimal('0'),
            )
            return total.quantize(CENT)

    @staticmethod
    def format_amount(amount: Decimal) -> str:
        with localcontext(AMOUNT_CONTEXT):
            return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP)} €"


export_editor    = ExportLineEditor()
livraison_editor = LineCollectionEditor(LivraisonLine)
