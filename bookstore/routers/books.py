from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_session
from bookstore.repository import BookRepository
from bookstore.schemas.book import (
    BookCreate,
    BookData,
    BookListData,
    BookResponse,
    BookUpdate,
    DeleteData,
    ErrorResponse,
)

NOT_FOUND = "Record not found!"

router = APIRouter(prefix="/books", tags=["books"], responses={400: {"model": ErrorResponse}})


def get_repository(session: AsyncSession = Depends(get_session)) -> BookRepository:
    return BookRepository(session)


@router.get("", response_model=BookListData)
async def find_books(repo: BookRepository = Depends(get_repository)):
    books = await repo.find_all()
    return BookListData(data=[BookResponse.model_validate(b) for b in books])


@router.get("/{book_id}", response_model=BookData)
async def find_book(book_id: str, repo: BookRepository = Depends(get_repository)):
    book = await repo.find_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=400, detail=NOT_FOUND)
    return BookData(data=BookResponse.model_validate(book))


@router.post("", response_model=BookData)
async def create_book(data: BookCreate, repo: BookRepository = Depends(get_repository)):
    book = await repo.create(data.title, data.author)
    return BookData(data=BookResponse.model_validate(book))


@router.api_route("/{book_id}", methods=["PUT", "PATCH"], response_model=BookData)
async def update_book(
    book_id: str,
    data: BookUpdate | None = None,
    repo: BookRepository = Depends(get_repository),
):
    book = await repo.update(book_id, data or BookUpdate())
    if book is None:
        raise HTTPException(status_code=400, detail=NOT_FOUND)
    return BookData(data=BookResponse.model_validate(book))


@router.delete("/{book_id}", response_model=DeleteData)
async def delete_book(book_id: str, repo: BookRepository = Depends(get_repository)):
    if not await repo.delete(book_id):
        raise HTTPException(status_code=400, detail=NOT_FOUND)
    return DeleteData(data=True)
