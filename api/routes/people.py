# api/routes/people.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, status

from core.sa.errors import ConstraintViolation
from core.sa.repositories import PersonRepository
from api.dependencies import MAX_ID, get_person_repository
from api.schemas.book import Book
from api.schemas.person import Person, PersonCreate, PersonWithBooks

router = APIRouter(tags=["people"])

@router.get("/people", response_model=List[Person])
def get_people(repo: PersonRepository = Depends(get_person_repository)):
    """List every person. Books are not included."""
    return repo.find_all()

@router.get("/person/{person_id}", response_model=PersonWithBooks)
def get_person(person_id: int = Path(ge=0, le=MAX_ID), repo: PersonRepository = Depends(get_person_repository)):
    """
    Get a person and all of their books.

    Args:
        person_id: The ID of the person
        repo: Person repository bound to the request session

    Returns:
        The person with ``Books`` filled from the books that reference them
    """
    person = repo.find_by_id(person_id)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Person {person_id} not found")

    books = repo.find_related_books(person.id)
    return PersonWithBooks(
        **Person.model_validate(person).model_dump(),
        books=[Book.model_validate(book) for book in books],
    )

@router.post("/create/person", response_model=Person)
def create_person(person: PersonCreate, repo: PersonRepository = Depends(get_person_repository)):
    try:
        return repo.create(name=person.name, email=person.email)
    except ConstraintViolation as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

@router.delete("/delete/person/{person_id}", response_model=Person)
def delete_person(person_id: int = Path(ge=0, le=MAX_ID), repo: PersonRepository = Depends(get_person_repository)):
    """Delete a person and return what was deleted. Their books are left in place."""
    person = repo.find_by_id(person_id)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Person {person_id} not found")
    return repo.delete(person)
