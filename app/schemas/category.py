# File: app/schemas/category.py

from typing import List, Optional

from pydantic import BaseModel, field_validator


class CategoryCreate(BaseModel):
    """
    New category. ``icon`` defaults to null and ``priority`` to 0 when
    omitted or sent as null.
    """

    name: str
    icon: Optional[str] = None
    priority: int = 0

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, v):
        return 0 if v is None else v


class CategoryUpdate(BaseModel):
    """
    Partial update: only the fields present in the body are written.
    A null ``name`` is ignored since the column is required.
    """

    name: Optional[str] = None
    icon: Optional[str] = None
    priority: Optional[int] = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        if data.get("name") is None:
            data.pop("name", None)
        if "priority" in data and data["priority"] is None:
            data["priority"] = 0
        return data


class CategoryRead(BaseModel):
    id: int
    user_id: Optional[str] = None
    name: str
    icon: Optional[str] = None
    priority: int
    is_default: bool

    class Config:
        from_attributes = True


class CategoryDeleted(BaseModel):
    message: str
    deleted: CategoryRead


class CategoryRestoreResponse(BaseModel):
    message: str
    categories: Optional[List[CategoryRead]] = None
