from fastapi import APIRouter, Depends, status

from boxcars.domain.user import User
from boxcars.entrypoints.http.dependencies import (
    get_create_vehicle_use_case,
    get_current_user,
    get_delete_vehicle_use_case,
    get_search_listings_use_case,
    get_update_vehicle_use_case,
    get_vehicle_by_id_use_case,
)
from boxcars.entrypoints.http.dtos.common import ApiResponse
from boxcars.entrypoints.http.dtos.vehicles import (
    VehicleCreateDTO,
    VehicleDataDTO,
    VehicleListDataDTO,
    VehicleSearchQueryDTO,
    VehicleUpdateDTO,
    vehicle_search_query,
)
from boxcars.entrypoints.http.error_responses import ERROR_RESPONSES
from boxcars.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from boxcars.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest
from boxcars.use_cases.delete_vehicle import DeleteVehicle, DeleteVehicleRequest
from boxcars.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from boxcars.use_cases.search_vehicle_listings import SearchVehicleListings
from boxcars.use_cases.update_vehicle import UpdateVehicle, UpdateVehicleRequest


router = APIRouter(tags=["Vehicles"])


@router.get(
    "",
    response_model=ApiResponse[VehicleListDataDTO],
    summary="Search vehicle listings",
    description="""
    Public listing of available vehicles with filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - make/model: case-insensitive substring
    - year, condition, fuelType, transmission, bodyType: exact match
    - minPrice/maxPrice: inclusive range, minPrice must not exceed maxPrice

    ## Sorting
    - sortBy: price, year, mileage, make, model, views, createdAt, updatedAt
    - sortOrder: asc (default when sortBy is given) or desc
    - Without sortBy the newest listings come first

    ## Pagination
    - Default limit: 10
    - Max limit: 50

    ## Example
    ```
    GET /api/vehicles?make=toyo&maxPrice=30000&sortBy=price&page=2
    ```
    """,
    responses={400: ERROR_RESPONSES[400]},
)
def list_vehicles(
    query: VehicleSearchQueryDTO = Depends(vehicle_search_query),
    use_case: SearchVehicleListings = Depends(get_search_listings_use_case),
) -> ApiResponse[VehicleListDataDTO]:
    """Listing endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = VehicleMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return VehicleMapper.to_list_response(result)


@router.get(
    "/{vehicle_id}",
    response_model=ApiResponse[VehicleDataDTO],
    summary="Get a vehicle",
    description="Returns one vehicle and counts the visit. The returned `views` excludes this visit.",
    responses={400: ERROR_RESPONSES[400], 404: ERROR_RESPONSES[404]},
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> ApiResponse[VehicleDataDTO]:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return ApiResponse[VehicleDataDTO](
        data=VehicleDataDTO(vehicle=VehicleMapper.to_vehicle_response(result.vehicle))
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[VehicleDataDTO],
    summary="Publish a vehicle",
    description="Dealers and admins only. The caller becomes the listing's dealer.",
    responses={k: ERROR_RESPONSES[k] for k in (400, 401, 403)},
)
def create_vehicle(
    body: VehicleCreateDTO,
    actor: User = Depends(get_current_user),
    use_case: CreateVehicle = Depends(get_create_vehicle_use_case),
) -> ApiResponse[VehicleDataDTO]:
    vehicle = use_case.execute(CreateVehicleRequest(draft=VehicleMapper.to_draft(body), actor=actor))
    return ApiResponse[VehicleDataDTO](
        message="Vehicle created successfully",
        data=VehicleDataDTO(vehicle=VehicleMapper.to_vehicle_response(vehicle)),
    )


@router.put(
    "/{vehicle_id}",
    response_model=ApiResponse[VehicleDataDTO],
    summary="Update a vehicle",
    description="Owner or admin only. Fields absent from the body are left unchanged.",
    responses=ERROR_RESPONSES,
)
def update_vehicle(
    vehicle_id: str,
    body: VehicleUpdateDTO,
    actor: User = Depends(get_current_user),
    use_case: UpdateVehicle = Depends(get_update_vehicle_use_case),
) -> ApiResponse[VehicleDataDTO]:
    vehicle = use_case.execute(
        UpdateVehicleRequest(vehicle_id=vehicle_id, changes=VehicleMapper.to_changes(body), actor=actor)
    )
    return ApiResponse[VehicleDataDTO](
        message="Vehicle updated successfully",
        data=VehicleDataDTO(vehicle=VehicleMapper.to_vehicle_response(vehicle)),
    )


@router.delete(
    "/{vehicle_id}",
    response_model=ApiResponse[None],
    summary="Delete a vehicle",
    description="Owner or admin only. The listing is removed permanently.",
    responses=ERROR_RESPONSES,
)
def delete_vehicle(
    vehicle_id: str,
    actor: User = Depends(get_current_user),
    use_case: DeleteVehicle = Depends(get_delete_vehicle_use_case),
) -> ApiResponse[None]:
    use_case.execute(DeleteVehicleRequest(vehicle_id=vehicle_id, actor=actor))
    return ApiResponse[None](message="Vehicle deleted successfully")
