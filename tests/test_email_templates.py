"""Tests for confirmation and operator email rendering."""

from datetime import datetime, timezone

import pytest

from app.models.booking import (
    CorporateStylingRequest,
    MakeupTrainingConsultation,
    PersonalizedStylingConsultation,
    PhotoshootStylingRequest,
    WeddingStylingConsultation,
)
from app.services.email_templates import detail_rows, render_admin_email, render_client_email
from app.services.form_types import (
    CORPORATE_STYLING,
    FORM_TYPES,
    MAKEUP_TRAINING,
    PERSONALIZED_STYLING,
    PHOTOSHOOT_STYLING,
    WEDDING_STYLING,
)

CREATED = datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)


def test_operator_email_reproduces_stored_values():
    record = PersonalizedStylingConsultation(
        createdAt=CREATED,
        fullName="Priya Nair",
        email="priya@example.com",
        phone="9000000001",
        consultationMode="Online",
        ageGroup="25-34",
        gender="Female",
        occupation="Architect",
        location="Pune",
        preferredDateTime="2025-06-10T11:00",
        stylingGoals=["Workwear", "Colour analysis"],
        additionalNotes="Prefers earthy tones",
    )
    html = render_admin_email(PERSONALIZED_STYLING, record)

    for value in ("Priya Nair", "priya@example.com", "9000000001", "Online", "25-34",
                  "Female", "Architect", "Pune", "Prefers earthy tones"):
        assert value in html
    assert "Workwear, Colour analysis" in html
    assert "10 June 2025, 11:00 AM" in html
    # Request date is shown in studio time (UTC+5:30)
    assert "01 June 2025, 02:30 PM" in html
    # Body concerns were not given
    assert "None provided" in html
    assert "No images were uploaded." in html


def test_absent_optional_fields_use_placeholders():
    record = PhotoshootStylingRequest(createdAt=CREATED, fullName="Asha", budgetRange=float("nan"))
    rows = dict(detail_rows(PHOTOSHOOT_STYLING, record))

    assert rows["Theme/Vision"] == "Not provided"
    assert rows["Budget Range"] == "Not provided"
    assert rows["Additional Notes"] == "None provided"


def test_currency_and_list_rendering():
    record = WeddingStylingConsultation(
        createdAt=CREATED,
        fullName="Meera",
        weddingDate="2025-12-05",
        events=["Mehendi", "Sangeet"],
        budgetRange="250000",
    )
    rows = dict(detail_rows(WEDDING_STYLING, record))

    assert rows["Budget Range"] == "₹250,000"
    assert rows["Events to be Styled"] == "Mehendi, Sangeet"
    assert rows["Wedding Date"] == "05 December 2025"


def test_attachment_count_is_mentioned():
    record = PhotoshootStylingRequest(
        createdAt=CREATED,
        references=[
            {"name": "a.png", "type": "image/png", "size": 1, "lastModified": 1, "data": b"a"},
        ],
    )
    html = render_admin_email(PHOTOSHOOT_STYLING, record)

    assert "1 image(s) have been attached to this email." in html


@pytest.mark.parametrize("mode,shown", [("Offline", True), ("Online", False)])
def test_training_location_only_for_offline_sessions(mode, shown):
    record = MakeupTrainingConsultation(
        createdAt=CREATED,
        consultationMode=mode,
        trainingLocation="Jaipur studio",
        hasBackground="No",
        backgroundDetails="ignored",
    )
    labels = [label for label, _ in detail_rows(MAKEUP_TRAINING, record)]

    assert ("Training Location" in labels) is shown
    assert "Background Details" not in labels


def test_corporate_participants_and_industry_details():
    record = CorporateStylingRequest(
        createdAt=CREATED,
        numberOfParticipants="10+",
        exactNumberOfParticipants="35",
        industryType="Other",
        otherIndustryType="Aviation",
        preferredDates=datetime(2025, 7, 15),
    )
    rows = dict(detail_rows(CORPORATE_STYLING, record))

    assert rows["Participants"] == "10+ (35)"
    assert rows["Industry"] == "Other (Aviation)"
    assert rows["Date"] == "15 July 2025"


def test_free_text_is_escaped():
    record = PersonalizedStylingConsultation(createdAt=CREATED, fullName="<script>alert(1)</script>")

    assert "<script>" not in render_admin_email(PERSONALIZED_STYLING, record)
    assert "<script>" not in render_client_email(PERSONALIZED_STYLING, record)


@pytest.mark.parametrize("form", list(FORM_TYPES.values()), ids=lambda f: f.key)
def test_every_form_renders_both_templates(form):
    record = form.model(createdAt=CREATED, **{form.name_field: "Kavya"})

    client_html = render_client_email(form, record)
    admin_html = render_admin_email(form, record)

    assert "Dear Kavya," in client_html
    assert form.client_subject.replace("&", "&amp;") in client_html
    assert form.admin_subject.replace("&", "&amp;") in admin_html
    assert "Request Date" in admin_html
