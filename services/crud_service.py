"""
Servicio CRUD genérico.

Implementa las reglas de negocio comunes a todos los recursos
(detección de duplicados, verificación de existencia y copia de campos
en la actualización) a partir de un descriptor de recurso.
"""

from typing import Generic, List, TypeVar
import logging

from pydantic import BaseModel

from core.exceptions import DuplicateException, NotFoundException
from core.resource import ResourceDescriptor
from repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

T = TypeVar('T')  # ORM Model


class CrudService(Generic[T]):
    """
    Servicio sin estado que ejecuta el pipeline CRUD de un recurso.
    """

    def __init__(self, repository: BaseRepository[T], descriptor: ResourceDescriptor):
        """
        Inicializa el servicio.

        Args:
            repository: Repositorio del modelo ORM del recurso
            descriptor: Descriptor del recurso
        """
        self.repository = repository
        self.descriptor = descriptor

    @property
    def name(self) -> str:
        return self.descriptor.name

    def _to_response_model(self, entity: T) -> BaseModel:
        return self.descriptor.response_schema.model_validate(entity)

    def get_all(self) -> List[BaseModel]:
        """Devuelve la colección completa (posiblemente vacía)."""
        logger.info("Consultando todos los registros de %s", self.name)
        return [self._to_response_model(e) for e in self.repository.get_all()]

    def get_by_id(self, id: int) -> BaseModel:
        """
        Devuelve un registro por identidad.

        Raises:
            NotFoundException: si no existe
        """
        logger.info("Buscando %s con ID: %s", self.name, id)
        return self._to_response_model(self._get_or_fail(id))

    def _get_or_fail(self, id: int) -> T:
        entity = self.repository.get_by_id(id)
        if entity is None:
            logger.warning("%s con ID %s no existe", self.name, id)
            raise NotFoundException(resource=self.name, identifier=str(id))
        return entity

    def find_duplicate(self, data: BaseModel) -> bool:
        """Indica si algún registro persistido comparte la clave de duplicado.

        Recorre todos los registros del recurso y compara sin distinguir
        mayúsculas/minúsculas.
        """
        return any(
            self.descriptor.matches_duplicate_key(existing, data)
            for existing in self.repository.get_all()
        )

    def create(self, data: BaseModel) -> BaseModel:
        """
        Crea un registro nuevo.

        Raises:
            DuplicateException: si ya existe un registro con la misma clave
        """
        key = ", ".join(str(getattr(data, f)) for f in self.descriptor.duplicate_key)
        logger.info("Guardando %s: %s", self.name, key)

        if self.find_duplicate(data):
            logger.warning("Intento de guardar %s duplicado: %s", self.name, key)
            raise DuplicateException(
                resource=self.name,
                field=", ".join(self.descriptor.duplicate_key),
                value=key,
            )

        entity = self.descriptor.model(**data.model_dump())
        created = self.repository.create(entity)
        self.repository.commit()

        logger.info("%s guardado correctamente con ID: %s", self.name, created.id)
        return self._to_response_model(created)

    def update(self, id: int, data: BaseModel) -> BaseModel:
        """
        Reemplaza los campos modificables de un registro existente.

        La identidad del registro cargado se conserva siempre.

        Raises:
            NotFoundException: si no existe
        """
        logger.info("Actualizando %s con ID: %s", self.name, id)
        entity = self._get_or_fail(id)

        values = data.model_dump()
        for field in self.descriptor.mutable_fields:
            setattr(entity, field, values[field])

        updated = self.repository.update(entity)
        self.repository.commit()

        logger.info("%s con ID %s actualizado correctamente", self.name, updated.id)
        return self._to_response_model(updated)

    def delete(self, id: int) -> None:
        """
        Elimina un registro por identidad.

        Raises:
            NotFoundException: si no existe
        """
        logger.info("Eliminando %s con ID: %s", self.name, id)
        if not self.repository.exists(id):
            logger.warning("No se puede eliminar. %s con ID %s no existe", self.name, id)
            raise NotFoundException(resource=self.name, identifier=str(id))

        self.repository.delete_by_id(id)
        self.repository.commit()
        logger.info("%s con ID %s eliminado correctamente", self.name, id)

    def find_by_filter(self, value: str) -> List[BaseModel]:
        """Registros cuyo atributo de filtro es exactamente ``value``."""
        attribute = self.descriptor.filter_attribute
        logger.info("Buscando %s por %s: %s", self.name, attribute, value)
        entities = self.repository.find_by_attribute(attribute, value)
        return [self._to_response_model(e) for e in entities]
