from typing import Any, Dict, List

from fastapi import APIRouter

from server.classes.api_classes import UsersRead

router = APIRouter(
    prefix="/api/v1/users",
    tags=["users"],
)


def list_users() -> List[Dict[str, Any]]:
    """Build the fixed user list. A new list is returned on every call."""
    return [
        {"id": 1, "name": "Jogn Doe"},
        {"id": 2, "name": "Jogn Smith"},
    ]


# --- User API Endpoints ---
@router.get("", response_model=UsersRead)
async def read_users():
    return {"users": list_users()}
