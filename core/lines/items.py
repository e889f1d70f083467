"""
Structures en mémoire des lignes de document.

Toutes les structures sont IMMUABLES (dataclasses gelées, tuples) :
chaque édition produit un nouvel objet, jamais une modification en place.
C'est ce qui garantit qu'un document observé n'est jamais à moitié
mis à jour.

Hiérarchie :
    LineItem                → champs communs (commande, modèle, quantité...)
    ├── ExportLine          → + prix unitaire, exclusion du total
    └── LivraisonLine       → aucun champ en plus

    LineDocument            → document parent (déclaration ou livraison)
    CatalogEntry            → modèle client utilisé pour pré-remplir une ligne

Format JSON (clés camelCase, échangées avec le frontend) :
    ExportLine    {id, commande, modele, description, quantity,
                   unitPrice, isExcluded, exportId}
    LivraisonLine {id, modele, commande, description, quantity, livraisonId}
"""

import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .coercion import coerce_flag, coerce_price, coerce_quantity, coerce_text


def new_line_id() -> str:
    """Identifiant de ligne unique (uuid4, sans collision entre deux ajouts rapides)."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class LineItem:
    id: str
    commande: str = ''
    modele: str = ''
    description: str = ''
    quantity: int = 1
    parent_id: Optional[str] = None

    # Champ JSON portant l'identifiant du document parent
    parent_key = 'parentId'

    # Conversion de chaque champ éditable : nom → fonction tolérante
    COERCERS = {
        'commande'   : coerce_text,
        'modele'     : coerce_text,
        'description': coerce_text,
        'quantity'   : coerce_quantity,
    }

    # Alias JSON → nom d'attribut
    ALIASES = {}

    @classmethod
    def editable_fields(cls):
        return tuple(cls.COERCERS)

    @classmethod
    def resolve_field(cls, name: str) -> Optional[str]:
        """Retourne le nom d'attribut pour un nom de champ (alias JSON accepté)."""
        name = cls.ALIASES.get(name, name)
        return name if name in cls.COERCERS else None

    @classmethod
    def blank(cls, parent_id=None):
        """Nouvelle ligne avec les valeurs par défaut."""
        return cls(id=new_line_id(), parent_id=parent_id)

    def with_value(self, name: str, raw_value):
        """Copie de la ligne avec un champ remplacé (valeur convertie)."""
        return replace(self, **{name: self.COERCERS[name](raw_value)})

    @classmethod
    def from_dict(cls, data: Mapping, parent_id=None):
        """
        Construit une ligne depuis un dict brut (JSON ou ligne de fichier).
        Les valeurs sont converties de façon tolérante ; les clés inconnues
        sont ignorées.
        """
        values = {}
        for key, raw in data.items():
            name = cls.resolve_field(key)
            if name:
                values[name] = cls.COERCERS[name](raw)

        line_id = data.get('id')
        return cls(
            id=str(line_id) if line_id else new_line_id(),
            parent_id=parent_id if parent_id is not None else data.get(cls.parent_key),
            **values,
        )

    def to_dict(self) -> dict:
        data = {
            'id'         : self.id,
            'commande'   : self.commande,
            'modele'     : self.modele,
            'description': self.description,
            'quantity'   : self.quantity,
        }
        data[self.parent_key] = self.parent_id
        return data


@dataclass(frozen=True)
class ExportLine(LineItem):
    unit_price: Decimal = Decimal('0')
    is_excluded: bool = False

    parent_key = 'exportId'

    COERCERS = {
        **LineItem.COERCERS,
        'unit_price' : coerce_price,
        'is_excluded': coerce_flag,
    }
    ALIASES = {
        'unitPrice' : 'unit_price',
        'isExcluded': 'is_excluded',
    }

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['unitPrice']  = self.unit_price
        data['isExcluded'] = self.is_excluded
        return data


@dataclass(frozen=True)
class LivraisonLine(LineItem):
    parent_key = 'livraisonId'


@dataclass(frozen=True)
class CatalogEntry:
    """Modèle client tel que vu par l'éditeur de lignes."""
    name: str
    commandes: str = ''
    description: str = ''
    id: Optional[str] = None
    client_id: Optional[str] = None

    @classmethod
    def from_source(cls, source):
        """Accepte un dict JSON ({name, commandes, ...}) ou un objet ClientModel."""
        if isinstance(source, cls):
            return source
        if isinstance(source, Mapping):
            get = source.get
        else:
            def get(key, default=None):
                return getattr(source, key, default)
        client_id = get('client_id') or get('clientId')
        return cls(
            name=get('name') or '',
            commandes=get('commandes') or '',
            description=get('description') or '',
            id=str(get('id')) if get('id') is not None else None,
            client_id=str(client_id) if client_id is not None else None,
        )


@dataclass(frozen=True)
class LineDocument:
    """
    Document parent : déclaration d'export ou livraison.

    L'ordre de `lines` est l'ordre d'affichage ; il est significatif.
    `header` porte les champs d'en-tête libres (dates, numéro, lot...).
    """
    id: Optional[str] = None
    client_name: str = ''
    lines: Tuple[LineItem, ...] = ()
    header: Mapping = field(default_factory=dict)

    def __post_init__(self):
        # Garantit l'immuabilité même si l'appelant passe une liste ou un dict
        object.__setattr__(self, 'lines', tuple(self.lines))
        object.__setattr__(self, 'header', MappingProxyType(dict(self.header)))

    def with_lines(self, lines):
        return replace(self, lines=tuple(lines))

    def with_header(self, **values):
        return replace(self, header={**self.header, **values})

    @classmethod
    def from_dict(cls, data: Mapping, line_class=LineItem):
        document_id = data.get('id')
        parent_id = str(document_id) if document_id else None
        header = {
            key: value for key, value in data.items()
            if key not in ('id', 'clientName', 'client_name', 'lines')
        }
        return cls(
            id=parent_id,
            client_name=coerce_text(data.get('clientName', data.get('client_name'))),
            lines=[line_class.from_dict(raw, parent_id=parent_id) for raw in data.get('lines') or []],
            header=header,
        )

    def to_dict(self) -> dict:
        data = dict(self.header)
        if self.id:
            data['id'] = self.id
        data['clientName'] = self.client_name
        data['lines'] = [line.to_dict() for line in self.lines]
        return data
