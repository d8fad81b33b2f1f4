"""Diagnostic endpoints for checking store connectivity."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from kenya_auth.api.dependencies import get_user_store
from kenya_auth.services.errors import StoreError
from kenya_auth.services.user_store import UserStore

router = APIRouter(tags=["diagnostics"])


@router.get("/test-db")
def test_db(store: Annotated[UserStore, Depends(get_user_store)]):
    """Report the database clock, or 500 if the database is unreachable."""
    try:
        now = store.current_time()
    except StoreError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Database connection failed"},
        )

    return {"success": True, "message": "Database connected!", "time": now}
