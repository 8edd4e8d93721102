"""
Descriptor de recurso.

Un descriptor declara todo lo que el pipeline CRUD genérico necesita saber
de un recurso: prefijo de URL, modelo ORM, esquemas de entrada/salida,
clave de duplicado, atributo de filtro y campos modificables.
"""

from dataclasses import dataclass
from typing import Any, Tuple, Type

from pydantic import BaseModel


@dataclass(frozen=True)
class ResourceDescriptor:
    """Declaración estática de un recurso CRUD."""

    name: str
    prefix: str
    model: Type[Any]
    schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    duplicate_key: Tuple[str, ...]
    filter_attribute: str
    mutable_fields: Tuple[str, ...]
    id_path: str = ""
    filter_path: str = ""
    tags: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.duplicate_key:
            raise ValueError(f"{self.name}: la clave de duplicado no puede estar vacía")
        if "id" in self.mutable_fields:
            raise ValueError(f"{self.name}: la identidad no puede ser un campo modificable")
        if not self.filter_path:
            object.__setattr__(self, "filter_path", f"/{self.filter_attribute}")

    @property
    def item_path(self) -> str:
        """Ruta relativa de un registro por identidad, p. ej. ``/id/{id}``."""
        return f"{self.id_path}/{{id}}"

    @property
    def filter_route(self) -> str:
        """Ruta relativa del filtro, p. ej. ``/state/{value}``."""
        return f"{self.filter_path}/{{value}}"

    def duplicate_key_of(self, record: Any) -> Tuple[Any, ...]:
        """Tupla normalizada de la clave de duplicado.

        ``record`` puede ser una instancia ORM, un esquema pydantic o un dict.
        Los textos se comparan sin distinguir mayúsculas/minúsculas.
        """
        values = []
        for attr in self.duplicate_key:
            if isinstance(record, dict):
                value = record.get(attr)
            else:
                value = getattr(record, attr, None)
            values.append(value.lower() if isinstance(value, str) else value)
        return tuple(values)

    def matches_duplicate_key(self, a: Any, b: Any) -> bool:
        return self.duplicate_key_of(a) == self.duplicate_key_of(b)
