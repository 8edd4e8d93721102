"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona las operaciones primitivas de
persistencia que consume el servicio CRUD para cualquier recurso.
"""

from typing import TypeVar, Generic, List, Optional, Type, Any
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from core.exceptions import NotFoundException, DatabaseException, DuplicateException
from core.integrity import is_unique_violation

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico que proporciona operaciones CRUD estándar.

    Las escrituras hacen ``flush`` pero no ``commit``: el servicio decide
    cuándo confirmar la transacción.
    """

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    @property
    def entity_name(self) -> str:
        return self.model_class.__name__.removesuffix("ORM")

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Returns:
            La entidad o None si no existe
        """
        try:
            return self.db.get(self.model_class, id)
        except SQLAlchemyError as e:
            logger.error("Error getting %s by id %s: %s", self.entity_name, id, e)
            raise DatabaseException(f"Error al obtener {self.entity_name}")

    def get_by_id_or_fail(self, id: int) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: If entity is not found
        """
        entity = self.get_by_id(id)
        if entity is None:
            raise NotFoundException(
                resource=self.entity_name,
                identifier=str(id)
            )
        return entity

    def get_all(self) -> List[T]:
        """Obtiene todas las entidades ordenadas por identidad."""
        try:
            stmt = select(self.model_class).order_by(self.model_class.id)
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            logger.error("Error getting all %s: %s", self.entity_name, e)
            raise DatabaseException(f"Error al listar {self.entity_name}")

    def find_by_attribute(self, name: str, value: Any) -> List[T]:
        """
        Busca las entidades cuyo atributo ``name`` es exactamente ``value``.

        Raises:
            ValueError: si el modelo no tiene ese atributo
        """
        if not hasattr(self.model_class, name):
            raise ValueError(f"{self.entity_name} no tiene el atributo '{name}'")
        try:
            column = getattr(self.model_class, name)
            stmt = (
                select(self.model_class)
                .where(column == value)
                .order_by(self.model_class.id)
            )
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            logger.error("Error finding %s by %s=%r: %s", self.entity_name, name, value, e)
            raise DatabaseException(f"Error al buscar {self.entity_name} por {name}")

    def create(self, entity: T) -> T:
        """
        Inserta una nueva entidad; la base de datos asigna la identidad.

        Raises:
            DuplicateException: si se viola la clave de duplicado
            DatabaseException: ante cualquier otro error de base de datos
        """
        return self._write(entity, "crear")

    def update(self, entity: T) -> T:
        """
        Guarda los cambios de una entidad existente (requiere identidad).
        """
        if getattr(entity, "id", None) is None:
            raise ValueError(f"No se puede actualizar {self.entity_name} sin identidad")
        return self._write(entity, "actualizar")

    def _write(self, entity: T, action: str) -> T:
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.warning("Duplicate key when trying to %s %s", action, self.entity_name)
                raise DuplicateException(resource=self.entity_name)
            logger.error("Integrity error when trying to %s %s: %s", action, self.entity_name, e)
            raise DatabaseException(f"Error al {action} {self.entity_name}")
        except SQLAlchemyError as e:
            logger.error("Error when trying to %s %s: %s", action, self.entity_name, e)
            self.db.rollback()
            raise DatabaseException(f"Error al {action} {self.entity_name}")

    def delete_by_id(self, id: int) -> None:
        """Elimina físicamente una entidad por su ID."""
        entity = self.get_by_id_or_fail(id)
        try:
            self.db.delete(entity)
            self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Error deleting %s %s: %s", self.entity_name, id, e)
            self.db.rollback()
            raise DatabaseException(f"Error al eliminar {self.entity_name}")

    def exists(self, id: int) -> bool:
        """
        Verifica si una entidad existe por su ID.
        """
        try:
            stmt = select(self.model_class.id).where(self.model_class.id == id)
            return self.db.scalars(stmt).first() is not None
        except SQLAlchemyError as e:
            logger.error("Error checking %s %s: %s", self.entity_name, id, e)
            raise DatabaseException(f"Error al consultar {self.entity_name}")

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise DuplicateException(resource=self.entity_name)
            logger.error("Error committing transaction: %s", e)
            raise DatabaseException("Error al guardar cambios en la base de datos")
        except SQLAlchemyError as e:
            logger.error("Error committing transaction: %s", e)
            self.db.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.db.rollback()
