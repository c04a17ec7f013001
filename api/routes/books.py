# api/routes/books.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, status

from core.sa.errors import ConstraintViolation
from core.sa.repositories import BookRepository
from api.dependencies import MAX_ID, get_book_repository
from api.schemas.book import Book, BookCreate

router = APIRouter(tags=["books"])

@router.get("/books", response_model=List[Book])
def get_books(repo: BookRepository = Depends(get_book_repository)):
    return repo.find_all()

@router.get("/book/{book_id}", response_model=Book)
def get_book(book_id: int = Path(ge=0, le=MAX_ID), repo: BookRepository = Depends(get_book_repository)):
    book = repo.find_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Book {book_id} not found")
    return book

@router.post("/create/book", response_model=Book)
def create_book(book: BookCreate, repo: BookRepository = Depends(get_book_repository)):
    """
    Create a book. ``PersonID`` is stored as given, without checking that
    the person exists.
    """
    try:
        return repo.create(
            title=book.title,
            author=book.author,
            call_number=book.call_number,
            person_id=book.person_id
        )
    except ConstraintViolation as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

@router.delete("/delete/book/{book_id}", response_model=Book)
def delete_book(book_id: int = Path(ge=0, le=MAX_ID), repo: BookRepository = Depends(get_book_repository)):
    book = repo.find_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Book {book_id} not found")
    return repo.delete(book)
