from fastapi import APIRouter, Depends

from boxcars.domain.user import User
from boxcars.domain.vehicle import Vehicle
from boxcars.entrypoints.http.dependencies import (
    get_add_favorite_use_case,
    get_current_user,
    get_list_favorites_use_case,
    get_remove_favorite_use_case,
)
from boxcars.entrypoints.http.dtos.common import ApiResponse
from boxcars.entrypoints.http.dtos.users import FavoritesDataDTO
from boxcars.entrypoints.http.error_responses import ERROR_RESPONSES
from boxcars.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from boxcars.use_cases.favorites import AddFavorite, ListFavorites, RemoveFavorite


router = APIRouter(tags=["Users"])


def _favorites(vehicles: list[Vehicle], message: str | None = None) -> ApiResponse[FavoritesDataDTO]:
    return ApiResponse[FavoritesDataDTO](
        message=message,
        data=FavoritesDataDTO(favorites=[VehicleMapper.to_vehicle_response(v) for v in vehicles]),
    )


@router.get(
    "/favorites",
    response_model=ApiResponse[FavoritesDataDTO],
    summary="List the caller's favorite vehicles",
    responses={401: ERROR_RESPONSES[401]},
)
def list_favorites(
    actor: User = Depends(get_current_user),
    use_case: ListFavorites = Depends(get_list_favorites_use_case),
) -> ApiResponse[FavoritesDataDTO]:
    return _favorites(use_case.execute(actor))


@router.post(
    "/favorites/{vehicle_id}",
    response_model=ApiResponse[FavoritesDataDTO],
    summary="Add a vehicle to favorites",
    description="Idempotent: adding a vehicle twice keeps a single entry.",
    responses={k: ERROR_RESPONSES[k] for k in (400, 401, 404)},
)
def add_favorite(
    vehicle_id: str,
    actor: User = Depends(get_current_user),
    use_case: AddFavorite = Depends(get_add_favorite_use_case),
) -> ApiResponse[FavoritesDataDTO]:
    return _favorites(use_case.execute(actor, vehicle_id), message="Vehicle added to favorites")


@router.delete(
    "/favorites/{vehicle_id}",
    response_model=ApiResponse[FavoritesDataDTO],
    summary="Remove a vehicle from favorites",
    description="Idempotent: removing a vehicle that is not a favorite is not an error.",
    responses={k: ERROR_RESPONSES[k] for k in (400, 401)},
)
def remove_favorite(
    vehicle_id: str,
    actor: User = Depends(get_current_user),
    use_case: RemoveFavorite = Depends(get_remove_favorite_use_case),
) -> ApiResponse[FavoritesDataDTO]:
    return _favorites(use_case.execute(actor, vehicle_id), message="Vehicle removed from favorites")
