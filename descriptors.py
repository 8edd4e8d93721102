"""
Descriptores de los recursos expuestos por la API.
"""

from core.resource import ResourceDescriptor
from database.models import LaboratorioORM, LaboratoryORM, SampleORM
from models.laboratorios import Laboratorio, LaboratorioCreate
from models.laboratories import Laboratory, LaboratoryCreate
from models.samples import Sample, SampleCreate


LABORATORIO = ResourceDescriptor(
    name="Laboratorio",
    prefix="/api/laboratorios",
    model=LaboratorioORM,
    schema=LaboratorioCreate,
    response_schema=Laboratorio,
    duplicate_key=("nombre",),
    filter_attribute="tipo",
    mutable_fields=("nombre", "descripcion", "tipo", "capacidad", "estado", "tipo_analisis"),
    tags=("laboratorios",),
)

LABORATORY = ResourceDescriptor(
    name="Laboratory",
    prefix="/api/laboratories",
    id_path="/id",
    model=LaboratoryORM,
    schema=LaboratoryCreate,
    response_schema=Laboratory,
    duplicate_key=("name",),
    filter_attribute="state",
    mutable_fields=("name", "description", "state"),
    tags=("laboratories",),
)

SAMPLE = ResourceDescriptor(
    name="Sample",
    prefix="/api/samples",
    id_path="/id",
    model=SampleORM,
    schema=SampleCreate,
    response_schema=Sample,
    duplicate_key=("code",),
    filter_attribute="laboratory",
    mutable_fields=("code", "description", "technician", "laboratory"),
    tags=("samples",),
)

ALL_RESOURCES = (LABORATORIO, LABORATORY, SAMPLE)
