"""
Booking intake pipeline - parse -> persist -> notify -> respond.

One pipeline serves every booking form; the FormType descriptor supplies the
record model, collection, attachment slots and field kinds.
"""
import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from starlette.datastructures import FormData, UploadFile

from app.models.booking import Attachment, SubmissionRecord, SubmissionResponse
from app.services.form_types import FormType
from app.services.notification_service import DeliveryOutcome
from app.utils.helpers import parse_datetime, parse_int

logger = logging.getLogger(__name__)


class SubmissionParseError(ValueError):
    """The client sent a value that cannot be decoded (e.g. a broken list field)"""


def parse_list_field(name: str, raw: Any) -> List[str]:
    try:
        values = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise SubmissionParseError(f"{name} is not valid JSON") from exc
    if not isinstance(values, list):
        raise SubmissionParseError(f"{name} must be a JSON array")
    return [str(v) for v in values]


async def read_attachments(form: FormType, form_data: FormData) -> List[Attachment]:
    """Files from slots 1..N in slot order; empty slots are skipped"""
    attachments = []
    for slot in form.slot_names():
        upload = form_data.get(slot)
        if not isinstance(upload, UploadFile):
            continue
        data = await upload.read()
        attachments.append(Attachment(
            name=upload.filename or slot,
            type=upload.content_type or "application/octet-stream",
            size=upload.size if upload.size is not None else len(data),
            lastModified=int(time.time() * 1000),
            data=data,
        ))
    return attachments


async def parse_submission(form: FormType, form_data: FormData) -> SubmissionRecord:
    """Normalize a multipart submission into the form's record model"""
    values: Dict[str, Any] = {
        "createdAt": datetime.now(timezone.utc),
        "status": "pending",
    }
    accepted = form.input_fields

    for key, value in form_data.multi_items():
        if form.is_attachment_field(key):
            continue
        if key not in accepted:
            continue
        if isinstance(value, UploadFile):
            value = value.filename or ""

        if key in form.list_fields:
            values[key] = parse_list_field(key, value)
        elif key in form.numeric_fields:
            values[key] = parse_int(value)
        elif key in form.date_fields:
            values[key] = parse_datetime(value)
        else:
            values[key] = value

    if form.accepts_attachments:
        attachments = await read_attachments(form, form_data)
        if attachments:
            values[form.attachment_field] = attachments

    return form.model(**values)


@dataclass
class IntakeResult:
    status_code: int
    response: SubmissionResponse
    record: Optional[SubmissionRecord] = None
    delivery: Optional[DeliveryOutcome] = None


class IntakeService:
    def __init__(self, store, notifier):
        self.store = store
        self.notifier = notifier

    def failure(self, form: FormType, status_code: int = 500) -> IntakeResult:
        return IntakeResult(
            status_code=status_code,
            response=SubmissionResponse(success=False, message=form.failure_message),
        )

    async def submit(self, form: FormType, form_data: FormData) -> IntakeResult:
        try:
            record = await parse_submission(form, form_data)
            inserted_id = await self.store.insert_one(form.collection, record.to_document())
        except SubmissionParseError as exc:
            logger.warning("⚠️ Rejected %s submission: %s", form.title, exc)
            return self.failure(form, 400)
        except Exception:
            logger.exception("❌ Error in %s submission", form.title)
            return self.failure(form, 500)

        delivery = await self.notifier.fan_out(form, record)
        logger.info("✅ %s request stored in '%s' with id %s", form.title, form.collection, inserted_id)
        return IntakeResult(
            status_code=201,
            response=SubmissionResponse(success=True, message=form.success_message, id=inserted_id),
            record=record,
            delivery=delivery,
        )
