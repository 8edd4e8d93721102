from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from models.common import ESTADO_PATTERN, TextoRequerido


class LaboratorioBase(BaseModel):
    nombre: TextoRequerido = Field(..., min_length=5, max_length=100)
    descripcion: TextoRequerido = Field(..., min_length=3, max_length=100)
    tipo: TextoRequerido = Field(..., min_length=5, max_length=50)
    capacidad: int = Field(..., ge=1, le=500, strict=True)
    estado: TextoRequerido = Field(..., pattern=ESTADO_PATTERN)
    tipo_analisis: TextoRequerido = Field(
        ...,
        min_length=3,
        max_length=100,
        validation_alias=AliasChoices("tipoAnalisis", "tipo_analisis"),
        serialization_alias="tipoAnalisis",
    )


class LaboratorioCreate(LaboratorioBase):
    """Modelo de entrada para crear o reemplazar un laboratorio.
    Un `id` en el cuerpo se ignora: la identidad la asigna la base de datos."""
    pass


class Laboratorio(LaboratorioBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
