from datetime import datetime

from pydantic import BaseModel, Field


class FeedTypeBase(BaseModel):
    manufacturer: str = Field(..., min_length=1, max_length=100)
    product_name: str = Field(..., min_length=1, max_length=100)

    model_config = {"str_strip_whitespace": True}


class FeedTypeCreate(FeedTypeBase):
    """Payload to register a food product."""
    pass


class FeedType(FeedTypeBase):
    """Full model returned from the database."""
    id: int
    created_at: datetime

    model_config = {"from_attributes": True, "str_strip_whitespace": True}

    @property
    def label(self) -> str:
        return f"{self.manufacturer} - {self.product_name}"
