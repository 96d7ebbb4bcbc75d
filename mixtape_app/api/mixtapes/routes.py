from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from mixtape_app.core import Mixtape, MixtapeCreate, MixtapeUpdate
from mixtape_app.mixtapes import MixtapeService

from ..dependencies import get_current_user_id, get_mixtape_service, get_optional_user_id

router = APIRouter()


@router.get("", response_model=List[Mixtape])
def list_mixtapes(
    user_id: Optional[str] = Depends(get_optional_user_id),
    service: MixtapeService = Depends(get_mixtape_service),
) -> List[Mixtape]:
    """
    List mixtapes.

    - authenticated : the caller's own mixtapes
    - anonymous     : public mixtapes
    """
    return service.list_mixtapes(user_id)


@router.get("/{mixtape_id}", response_model=Mixtape)
def get_mixtape(
    mixtape_id: str,
    user_id: Optional[str] = Depends(get_optional_user_id),
    service: MixtapeService = Depends(get_mixtape_service),
) -> Mixtape:
    """
    Return one mixtape if it is public, or owned by / shared with the caller.

    404 when it does not exist, 403 when it exists but is not visible.
    """
    return service.get_mixtape(mixtape_id, user_id)


@router.post("", response_model=Mixtape, status_code=201)
def create_mixtape(
    body: MixtapeCreate,
    user_id: str = Depends(get_current_user_id),
    service: MixtapeService = Depends(get_mixtape_service),
) -> Mixtape:
    return service.create_mixtape(body, user_id)


@router.put("/{mixtape_id}")
def update_mixtape(
    mixtape_id: str,
    body: MixtapeUpdate,
    user_id: str = Depends(get_current_user_id),
    service: MixtapeService = Depends(get_mixtape_service),
) -> Dict[str, Any]:
    """
    Partially update a mixtape (owner or collaborator).

    Collaborators may change tracks, note, description and cover image;
    owner-only fields they send are dropped.
    """
    mixtape = service.update_mixtape(mixtape_id, body, user_id)
    return {
        "message": "Mixtape updated successfully",
        "mixtape": mixtape.model_dump(by_alias=True, mode="json"),
    }


@router.delete("/{mixtape_id}")
def delete_mixtape(
    mixtape_id: str,
    user_id: str = Depends(get_current_user_id),
    service: MixtapeService = Depends(get_mixtape_service),
) -> Dict[str, str]:
    service.delete_mixtape(mixtape_id, user_id)
    return {"message": "Mixtape deleted successfully"}
