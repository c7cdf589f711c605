# File: app/api/v1/routes_categories.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import CurrentUser, get_current_user, get_db
from app.schemas.category import (
    CategoryCreate,
    CategoryDeleted,
    CategoryRead,
    CategoryRestoreResponse,
    CategoryUpdate,
)
from app.services import category_service
from app.services.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("", response_model=list[CategoryRead], summary="List categories")
def list_categories(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    The caller's categories by (priority, id). The first call copies the
    default categories into the caller's set.
    """
    try:
        return category_service.list_categories(db, current.id)
    except Exception as e:
        logger.exception("Listing categories failed")
        raise _server_error(e)


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
def create_category(
    payload: CategoryCreate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return category_service.create_category(db, current.id, payload)
    except Exception as e:
        logger.exception("Creating category failed")
        raise _server_error(e)


@router.post(
    "/restore-all",
    response_model=CategoryRestoreResponse,
    response_model_exclude_none=True,
    summary="Restore missing default categories",
)
def restore_all(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        added = category_service.restore_default_categories(db, current.id)
    except Exception as e:
        logger.exception("Restoring categories failed")
        raise _server_error(e)

    if not added:
        return {"message": "All default categories are already present"}
    return {"message": f"Added {len(added)} categories", "categories": added}


@router.put("/{category_id}", response_model=CategoryRead, summary="Update category")
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return category_service.update_category(db, current.id, category_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.exception("Updating category %s failed", category_id)
        raise _server_error(e)


@router.delete("/{category_id}", response_model=CategoryDeleted, summary="Delete category")
def delete_category(
    category_id: int,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        deleted = category_service.delete_category(db, current.id, category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.exception("Deleting category %s failed", category_id)
        raise _server_error(e)
    return {"message": "Category deleted", "deleted": deleted}
