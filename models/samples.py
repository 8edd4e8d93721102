from pydantic import BaseModel, ConfigDict, Field

from models.common import TextoRequerido


class SampleBase(BaseModel):
    code: TextoRequerido = Field(..., min_length=5, max_length=50)
    description: TextoRequerido = Field(..., min_length=5, max_length=100)
    # Snapshots planos del técnico y del laboratorio
    technician: TextoRequerido = Field(..., max_length=100)
    laboratory: TextoRequerido = Field(..., max_length=100)


class SampleCreate(SampleBase):
    pass


class Sample(SampleBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
