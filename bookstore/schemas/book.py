from pydantic import BaseModel, ConfigDict, field_validator


class BookCreate(BaseModel):
    title: str
    author: str

    @field_validator("title", "author")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class BookUpdate(BaseModel):
    """Partial update: omitted, null and blank fields keep their stored value."""

    title: str | None = None
    author: str | None = None

    @field_validator("title", "author")
    @classmethod
    def blank_as_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str


class BookData(BaseModel):
    data: BookResponse


class BookListData(BaseModel):
    data: list[BookResponse]


class DeleteData(BaseModel):
    data: bool


class ErrorResponse(BaseModel):
    error: str
