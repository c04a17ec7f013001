# api/schemas/person.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from api.schemas.book import Book

class PersonBase(BaseModel):
    name: str = Field(default="", alias="Name")
    email: str = Field(default="", alias="Email")

    model_config = ConfigDict(populate_by_name=True)

class PersonCreate(PersonBase):
    """Request body for POST /create/person. An ID in the body is ignored."""
    pass

class Person(PersonBase):
    id: int = Field(alias="ID")
    created_at: Optional[datetime] = Field(default=None, alias="CreatedAt")
    updated_at: Optional[datetime] = Field(default=None, alias="UpdatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

class PersonWithBooks(Person):
    books: List[Book] = Field(default_factory=list, alias="Books")
