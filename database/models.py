from sqlalchemy import CheckConstraint, Column, Index, Integer, String, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()

ESTADOS = ("ACTIVO", "INACTIVO")


def _length_between(column: str, minimo: int, maximo: int) -> str:
    return f"length({column}) BETWEEN {minimo} AND {maximo}"


def _estado_valido(column: str) -> str:
    valores = ", ".join(f"'{e}'" for e in ESTADOS)
    return f"{column} IN ({valores})"


#ORM: Laboratorios
class LaboratorioORM(Base):
    __tablename__ = "LABORATORIO"
    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    descripcion = Column(String(100), nullable=False)
    tipo = Column(String(50), nullable=False, index=True)
    capacidad = Column(Integer, nullable=False)
    estado = Column(String(20), nullable=False)
    #columna en DB: tipo_analisis, campo JSON: tipoAnalisis
    tipo_analisis = Column(String(100), nullable=False)

    __table_args__ = (
        CheckConstraint(_length_between("nombre", 5, 100), name="ck_laboratorio_nombre"),
        CheckConstraint(_length_between("descripcion", 3, 100), name="ck_laboratorio_descripcion"),
        CheckConstraint(_length_between("tipo", 5, 50), name="ck_laboratorio_tipo"),
        CheckConstraint("capacidad BETWEEN 1 AND 500", name="ck_laboratorio_capacidad"),
        CheckConstraint(_estado_valido("estado"), name="ck_laboratorio_estado"),
        CheckConstraint(_length_between("tipo_analisis", 3, 100), name="ck_laboratorio_tipo_analisis"),
    )


#ORM: Laboratories
class LaboratoryORM(Base):
    __tablename__ = "LABORATORY"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(100), nullable=False)
    state = Column(String(20), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint(_length_between("name", 5, 100), name="ck_laboratory_name"),
        CheckConstraint(_length_between("description", 5, 100), name="ck_laboratory_description"),
        CheckConstraint(_estado_valido("state"), name="ck_laboratory_state"),
    )


#ORM: Samples
class SampleORM(Base):
    __tablename__ = "SAMPLE"
    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False)
    description = Column(String(100), nullable=False)
    #snapshots planos, sin FK hacia otros recursos
    technician = Column(String(100), nullable=False)
    laboratory = Column(String(100), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint(_length_between("code", 5, 50), name="ck_sample_code"),
        CheckConstraint(_length_between("description", 5, 100), name="ck_sample_description"),
        CheckConstraint(_length_between("technician", 1, 100), name="ck_sample_technician"),
        CheckConstraint(_length_between("laboratory", 1, 100), name="ck_sample_laboratory"),
    )


#clave de duplicado: única sin distinguir mayúsculas/minúsculas
Index("uq_laboratorio_nombre", func.lower(LaboratorioORM.nombre), unique=True)
Index("uq_laboratory_name", func.lower(LaboratoryORM.name), unique=True)
Index("uq_sample_code", func.lower(SampleORM.code), unique=True)
