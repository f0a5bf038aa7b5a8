"""
Booking form routes - one multipart POST endpoint per booking form
"""
import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from app.dependencies import get_intake_service
from app.models.booking import SubmissionResponse
from app.services.form_types import FORM_TYPES, FormType
from app.services.intake_service import IntakeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Bookings"])

def _register(form: FormType) -> None:
    async def submit_booking(
        request: Request,
        service: IntakeService = Depends(get_intake_service),
    ):
        try:
            form_data = await request.form()
        except Exception:
            logger.exception("❌ Could not read %s form body", form.title)
            result = service.failure(form)
        else:
            try:
                result = await service.submit(form, form_data)
            finally:
                await form_data.close()

        return JSONResponse(
            status_code=result.status_code,
            content=result.response.model_dump(exclude_none=True),
        )

    router.add_api_route(
        form.path,
        submit_booking,
        methods=["POST"],
        name=f"submit_{form.key}",
        summary=f"Submit a {form.title} request",
        status_code=status.HTTP_201_CREATED,
        response_model=SubmissionResponse,
    )

for _form in FORM_TYPES.values():
    _register(_form)
