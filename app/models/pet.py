from datetime import datetime

from pydantic import BaseModel, Field


class PetBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)

    model_config = {"str_strip_whitespace": True}


class PetCreate(PetBase):
    """Payload to register a pet."""
    pass


class PetUpdate(PetBase):
    """Payload to rename a pet."""
    pass


class Pet(PetBase):
    """Full model returned from the database."""
    id: int
    created_at: datetime

    model_config = {"from_attributes": True, "str_strip_whitespace": True}
