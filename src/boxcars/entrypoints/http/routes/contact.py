from fastapi import APIRouter, Depends, status

from boxcars.domain.user import User
from boxcars.domain.vehicle import Paging
from boxcars.entrypoints.http.dependencies import (
    get_current_user,
    get_list_dealer_contacts_use_case,
    get_submit_contact_use_case,
    get_update_contact_status_use_case,
)
from boxcars.entrypoints.http.dtos.common import ApiResponse
from boxcars.entrypoints.http.dtos.contact import (
    ContactCreateDTO,
    ContactDataDTO,
    ContactListDataDTO,
    ContactQueryDTO,
    ContactStatusUpdateDTO,
    contact_query,
)
from boxcars.entrypoints.http.error_responses import ERROR_RESPONSES
from boxcars.entrypoints.http.mappers.contact_mapper import ContactMapper
from boxcars.use_cases.list_dealer_contacts import ListDealerContacts, ListDealerContactsRequest
from boxcars.use_cases.submit_contact import SubmitContact
from boxcars.use_cases.update_contact_status import UpdateContactStatus, UpdateContactStatusRequest


router = APIRouter(tags=["Contact"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ContactDataDTO],
    summary="Send an inquiry about a vehicle",
    description="""
    Public. The inquiry is routed to the dealer who owns the vehicle.

    - name: at least 2 characters
    - subject: at least 5 characters
    - message: at least 10 characters
    - phone: optional, digits with an optional leading +
    - vehicleId: must reference an existing vehicle
    """,
    responses={400: ERROR_RESPONSES[400], 404: ERROR_RESPONSES[404]},
)
def submit_contact(
    body: ContactCreateDTO,
    use_case: SubmitContact = Depends(get_submit_contact_use_case),
) -> ApiResponse[ContactDataDTO]:
    contact = use_case.execute(ContactMapper.to_draft(body))
    return ApiResponse[ContactDataDTO](
        message="Your message has been sent successfully. We will get back to you soon.",
        data=ContactDataDTO(contact=ContactMapper.to_contact_response(contact)),
    )


@router.get(
    "",
    response_model=ApiResponse[ContactListDataDTO],
    summary="List inquiries for the calling dealer",
    responses={k: ERROR_RESPONSES[k] for k in (400, 401, 403)},
)
def list_contacts(
    query: ContactQueryDTO = Depends(contact_query),
    actor: User = Depends(get_current_user),
    use_case: ListDealerContacts = Depends(get_list_dealer_contacts_use_case),
) -> ApiResponse[ContactListDataDTO]:
    result = use_case.execute(
        ListDealerContactsRequest(
            actor=actor,
            filters=ContactMapper.to_filters(query),
            paging=Paging(page=query.page, limit=query.limit),
        )
    )
    return ContactMapper.to_list_response(result.contacts, result.page_info)


@router.put(
    "/{contact_id}/status",
    response_model=ApiResponse[ContactDataDTO],
    summary="Change an inquiry's status",
    description="Admins only. Any status may follow any other; the inquiry is marked as read.",
    responses=ERROR_RESPONSES,
)
def update_contact_status(
    contact_id: str,
    body: ContactStatusUpdateDTO,
    actor: User = Depends(get_current_user),
    use_case: UpdateContactStatus = Depends(get_update_contact_status_use_case),
) -> ApiResponse[ContactDataDTO]:
    contact = use_case.execute(
        UpdateContactStatusRequest(contact_id=contact_id, status=body.status.value, actor=actor)
    )
    return ApiResponse[ContactDataDTO](
        message="Contact status updated",
        data=ContactDataDTO(contact=ContactMapper.to_contact_response(contact)),
    )
