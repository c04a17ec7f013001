# api/schemas/book.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class BookBase(BaseModel):
    title: str = Field(default="", alias="Title")
    author: str = Field(default="", alias="Author")
    call_number: int = Field(default=0, alias="CallNumber")
    person_id: int = Field(default=0, alias="PersonID")

    model_config = ConfigDict(populate_by_name=True)

class BookCreate(BookBase):
    """Request body for POST /create/book. An ID in the body is ignored."""
    pass

class Book(BookBase):
    id: int = Field(alias="ID")
    created_at: Optional[datetime] = Field(default=None, alias="CreatedAt")
    updated_at: Optional[datetime] = Field(default=None, alias="UpdatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
