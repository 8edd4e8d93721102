from pydantic import BaseModel, ConfigDict, Field

from models.common import ESTADO_PATTERN, TextoRequerido


class LaboratoryBase(BaseModel):
    name: TextoRequerido = Field(..., min_length=5, max_length=100)
    description: TextoRequerido = Field(..., min_length=5, max_length=100)
    state: TextoRequerido = Field(..., pattern=ESTADO_PATTERN)


class LaboratoryCreate(LaboratoryBase):
    pass


class Laboratory(LaboratoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
