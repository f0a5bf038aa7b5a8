"""
Email rendering for booking notifications.

Templates live in app/templates/emails and are rendered with autoescaping, so
free-text form values can never inject markup into the studio's inbox.
"""
from pathlib import Path
from typing import List, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.models.booking import SubmissionRecord
from app.services.form_types import DetailRow, FormType
from app.utils.helpers import (
    STUDIO_TZ,
    format_currency,
    format_date,
    format_datetime,
    format_list,
    is_nan,
)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_row_value(row: DetailRow, record: SubmissionRecord, tz=STUDIO_TZ) -> str:
    if row.display is not None:
        return row.display(record)

    value = getattr(record, row.field, None)
    if value is None or is_nan(value):
        return row.placeholder or ""

    if row.kind == "date":
        return format_date(value, tz)
    if row.kind == "datetime":
        return format_datetime(value, tz)
    if row.kind == "currency":
        return format_currency(value)
    if row.kind == "list":
        return format_list(value)
    return str(value)


def detail_rows(form: FormType, record: SubmissionRecord, tz=STUDIO_TZ) -> List[Tuple[str, str]]:
    """(label, display value) pairs for every row that applies to this record"""
    rows = []
    for row in form.detail_rows:
        if row.when is not None and not row.when(record):
            continue
        rows.append((row.label, render_row_value(row, record, tz)))
    return rows


def render_client_email(form: FormType, record: SubmissionRecord) -> str:
    template = env.get_template(form.client_template)
    return template.render(
        form=form,
        record=record,
        name=getattr(record, form.name_field, ""),
    )


def render_admin_email(form: FormType, record: SubmissionRecord, tz=STUDIO_TZ) -> str:
    attachments = getattr(record, form.attachment_field, None) if form.attachment_field else None
    template = env.get_template("emails/admin_details.html")
    return template.render(
        form=form,
        rows=detail_rows(form, record, tz),
        attachment_count=len(attachments or []),
    )
