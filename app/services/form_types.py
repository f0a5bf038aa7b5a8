"""
Booking form descriptors.

Every booking endpoint runs the same intake pipeline; what differs between
forms (record model, collection, attachment slots, field kinds, email copy)
is declared here, once per form.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Optional, Tuple, Type

from app.config.database import Collections
from app.models.booking import (
    SubmissionRecord,
    WeddingStylingConsultation,
    PhotoshootStylingRequest,
    PersonalizedStylingConsultation,
    MakeupTrainingConsultation,
    SoftSkillsCoachingRequest,
    CorporateStylingRequest,
)

NOT_PROVIDED = "Not provided"
NONE_PROVIDED = "None provided"

# Server-owned fields a client can never set
RESERVED_FIELDS = frozenset({"createdAt", "status"})


@dataclass(frozen=True)
class DetailRow:
    """One line of the operator detail email"""

    label: str
    field: str
    kind: str = "text"  # text | date | datetime | currency | list
    placeholder: Optional[str] = None
    when: Optional[Callable[[SubmissionRecord], bool]] = None
    display: Optional[Callable[[SubmissionRecord], str]] = None


REQUEST_DATE = DetailRow("Request Date", "createdAt", kind="datetime")


@dataclass(frozen=True)
class FormType:
    key: str
    path: str
    title: str
    model: Type[SubmissionRecord]
    collection: str
    recipient_field: str
    name_field: str
    client_subject: str
    client_template: str
    admin_subject: str
    admin_intro: str
    success_message: str
    failure_message: str
    detail_rows: Tuple[DetailRow, ...]
    attachment_prefix: Optional[str] = None
    attachment_slots: int = 0
    attachment_field: Optional[str] = None
    attachment_label: str = "Images"
    list_fields: FrozenSet[str] = field(default_factory=frozenset)
    numeric_fields: FrozenSet[str] = field(default_factory=frozenset)
    date_fields: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def accepts_attachments(self) -> bool:
        return bool(self.attachment_prefix and self.attachment_slots)

    @property
    def input_fields(self) -> FrozenSet[str]:
        """Field names a client may submit as plain form values"""
        names = set(self.model.model_fields) - RESERVED_FIELDS
        names.discard(self.attachment_field)
        return frozenset(names)

    def slot_names(self) -> Tuple[str, ...]:
        if not self.accepts_attachments:
            return ()
        return tuple(f"{self.attachment_prefix}{i}" for i in range(1, self.attachment_slots + 1))

    def is_attachment_field(self, name: str) -> bool:
        return self.accepts_attachments and name.startswith(self.attachment_prefix)


WEDDING_STYLING = FormType(
    key="wedding_styling",
    path="/weddingstylingconsultation",
    title="Wedding Styling & Photoshoot",
    model=WeddingStylingConsultation,
    collection=Collections.WEDDING_STYLING_CONSULTATIONS,
    recipient_field="contactEmail",
    name_field="fullName",
    client_subject="Your Wedding Styling & Photoshoot Booking is Confirmed!",
    client_template="emails/wedding_confirmation.html",
    admin_subject="New Wedding Styling Consultation Request",
    admin_intro="A new wedding styling consultation has been requested on your platform.",
    success_message="Wedding styling consultation request submitted successfully",
    failure_message="Failed to submit wedding styling consultation request",
    detail_rows=(
        DetailRow("Name", "fullName"),
        DetailRow("Email", "contactEmail"),
        DetailRow("Phone", "contactPhone"),
        DetailRow("Wedding Location", "weddingLocation"),
        DetailRow("Wedding Date", "weddingDate", kind="date"),
        DetailRow("Package", "package"),
        DetailRow("Events to be Styled", "events", kind="list"),
        DetailRow("Has Vendors", "hasVendors"),
        DetailRow("Consultation Mode", "consultationMode"),
        DetailRow("Budget Range", "budgetRange", kind="currency"),
        DetailRow("Additional Notes", "additionalNotes", placeholder=NONE_PROVIDED),
        REQUEST_DATE,
    ),
    attachment_prefix="inspiration",
    attachment_slots=5,
    attachment_field="inspirationImages",
    attachment_label="Inspiration Images",
    list_fields=frozenset({"events"}),
)

PHOTOSHOOT_STYLING = FormType(
    key="photoshoot_styling",
    path="/PhotoshootStylingManagement",
    title="Photoshoot Styling & Management",
    model=PhotoshootStylingRequest,
    collection=Collections.PHOTOSHOOT_STYLING_REQUESTS,
    recipient_field="email",
    name_field="fullName",
    client_subject="Your Photoshoot Styling & Management is Confirmed!",
    client_template="emails/photoshoot_confirmation.html",
    admin_subject="New Photoshoot Styling Request",
    admin_intro="A new photoshoot styling request has been submitted on your platform.",
    success_message="Photoshoot styling request submitted successfully",
    failure_message="Failed to submit photoshoot styling request",
    detail_rows=(
        DetailRow("Name", "fullName"),
        DetailRow("Email", "email"),
        DetailRow("Phone", "phone"),
        DetailRow("Photoshoot Type", "photoshootType"),
        DetailRow("Location", "location"),
        DetailRow("Preferred Date", "preferredDate", kind="date"),
        DetailRow("Has Photographer", "hasPhotographer"),
        DetailRow("Styling Requirements", "stylingRequirements"),
        DetailRow("Hair & Makeup", "needsHairMakeup"),
        DetailRow("Theme/Vision", "theme", placeholder=NOT_PROVIDED),
        DetailRow("Budget Range", "budgetRange", kind="currency", placeholder=NOT_PROVIDED),
        DetailRow("Additional Notes", "additionalNotes", placeholder=NONE_PROVIDED),
        REQUEST_DATE,
    ),
    attachment_prefix="reference",
    attachment_slots=5,
    attachment_field="references",
    attachment_label="Reference Images",
    numeric_fields=frozenset({"budgetRange"}),
)

PERSONALIZED_STYLING = FormType(
    key="personalized_styling",
    path="/personalizedstylingconsultation",
    title="Personalized Styling Consultation",
    model=PersonalizedStylingConsultation,
    collection=Collections.PERSONALIZED_STYLING_CONSULTATIONS,
    recipient_field="email",
    name_field="fullName",
    client_subject="Your Personalized Styling Consultation is Booked!",
    client_template="emails/personalized_confirmation.html",
    admin_subject="New Personalized Styling Consultation Request",
    admin_intro="A new personalized styling consultation has been requested on your platform.",
    success_message="Personalized styling consultation request submitted successfully",
    failure_message="Failed to submit personalized styling consultation request",
    detail_rows=(
        DetailRow("Name", "fullName"),
        DetailRow("Email", "email"),
        DetailRow("Phone", "phone"),
        DetailRow("Consultation Mode", "consultationMode"),
        DetailRow("Age Group", "ageGroup"),
        DetailRow("Gender", "gender"),
        DetailRow("Occupation", "occupation", placeholder=NOT_PROVIDED),
        DetailRow("Location", "location"),
        DetailRow("Preferred Date/Time", "preferredDateTime", kind="datetime"),
        DetailRow("Styling Goals", "stylingGoals", kind="list"),
        DetailRow("Body Concerns", "bodyConcerns", placeholder=NONE_PROVIDED),
        DetailRow("Additional Notes", "additionalNotes", placeholder=NONE_PROVIDED),
        REQUEST_DATE,
    ),
    attachment_prefix="image",
    attachment_slots=3,
    attachment_field="images",
    attachment_label="Images",
    list_fields=frozenset({"stylingGoals"}),
)

MAKEUP_TRAINING = FormType(
    key="makeup_training",
    path="/makeupstylingandtrainingconsultation",
    title="Makeup & Styling Training",
    model=MakeupTrainingConsultation,
    collection=Collections.MAKEUP_TRAINING_CONSULTATIONS,
    recipient_field="contactEmail",
    name_field="fullName",
    client_subject="Your Training at Styltara Studios is Booked!",
    client_template="emails/makeup_training_confirmation.html",
    admin_subject="New Makeup & Styling Training Consultation Request",
    admin_intro="A new makeup and styling training consultation has been requested on your platform.",
    success_message="Makeup and styling training consultation request submitted successfully",
    failure_message="Failed to submit makeup and styling training consultation request",
    detail_rows=(
        DetailRow("Name", "fullName"),
        DetailRow("Email", "contactEmail"),
        DetailRow("Phone", "contactPhone"),
        DetailRow("Consultation Mode", "consultationMode"),
        DetailRow(
            "Training Location", "trainingLocation", placeholder=NOT_PROVIDED,
            when=lambda r: r.consultationMode == "Offline",
        ),
        DetailRow("Area of Interest", "areaOfInterest"),
        DetailRow("Background in Styling/Makeup", "hasBackground"),
        DetailRow(
            "Background Details", "backgroundDetails", placeholder=NOT_PROVIDED,
            when=lambda r: r.hasBackground == "Yes",
        ),
        DetailRow("Training Reason", "trainingReason", placeholder=NONE_PROVIDED),
        DetailRow("Preferred Language", "preferredLanguage"),
        DetailRow("Preferred Date/Time", "preferredDateTime", kind="datetime"),
        DetailRow("Additional Questions", "additionalQuestions", placeholder=NONE_PROVIDED),
        REQUEST_DATE,
    ),
)

SOFT_SKILLS = FormType(
    key="soft_skills",
    path="/softskills",
    title="Soft Skills & Etiquette Coaching",
    model=SoftSkillsCoachingRequest,
    collection=Collections.SOFT_SKILLS_COACHING_REQUESTS,
    recipient_field="contactEmail",
    name_field="fullName",
    client_subject="Your Soft Skills & Etiquette Coaching is Confirmed!",
    client_template="emails/soft_skills_confirmation.html",
    admin_subject="New Soft Skills & Etiquette Coaching Request",
    admin_intro="A new soft skills and etiquette coaching session has been requested on your platform.",
    success_message="Soft Skills and Etiquette Coaching request submitted successfully",
    failure_message="Failed to submit soft skills coaching request",
    detail_rows=(
        DetailRow("Name", "fullName"),
        DetailRow("Email", "contactEmail"),
        DetailRow("Phone", "contactPhone"),
        DetailRow("Occupation", "occupation"),
        DetailRow("Coaching Purpose", "coachingPurpose"),
        DetailRow("Coaching Mode", "coachingMode"),
        DetailRow("Preferred Date/Time", "preferredDateTime", kind="datetime"),
        DetailRow("Previous Coaching Experience", "hasPreviousCoaching"),
        DetailRow("Preferred Language", "preferredLanguage"),
        DetailRow("Additional Expectations", "additionalExpectations", placeholder=NONE_PROVIDED),
        REQUEST_DATE,
    ),
)


def _participants(record: CorporateStylingRequest) -> str:
    if record.numberOfParticipants == "10+":
        return f"{record.numberOfParticipants} ({record.exactNumberOfParticipants or NOT_PROVIDED})"
    return record.numberOfParticipants


def _industry(record: CorporateStylingRequest) -> str:
    if record.industryType == "Other":
        return f"Other ({record.otherIndustryType or NOT_PROVIDED})"
    return record.industryType


CORPORATE_STYLING = FormType(
    key="corporate_styling",
    path="/corporatestyling",
    title="Corporate Styling",
    model=CorporateStylingRequest,
    collection=Collections.CORPORATE_STYLING_REQUESTS,
    recipient_field="contactInfo",
    name_field="contactPersonName",
    client_subject="Your Corporate Styling Session is Booked!",
    client_template="emails/corporate_confirmation.html",
    admin_subject="New Corporate Styling Request",
    admin_intro="A new corporate styling request has been submitted.",
    success_message="Corporate styling request submitted successfully",
    failure_message="Failed to submit corporate styling request",
    detail_rows=(
        DetailRow("Company", "companyName"),
        DetailRow("Contact", "contactPersonName"),
        DetailRow("Designation", "designation"),
        DetailRow("Email/Phone", "contactInfo"),
        DetailRow("Participants", "numberOfParticipants", display=_participants),
        DetailRow("Service", "serviceType"),
        DetailRow("Industry", "industryType", display=_industry),
        DetailRow("Location", "companyLocation"),
        DetailRow("Date", "preferredDates", kind="date", placeholder=NOT_PROVIDED),
        DetailRow("Mode", "serviceMode"),
        DetailRow("Dress Code Guidelines", "dressCodeGuidelines", placeholder=NONE_PROVIDED),
        DetailRow("Objectives", "sessionObjectives"),
        DetailRow("Additional Notes", "additionalNotes", placeholder=NONE_PROVIDED),
        REQUEST_DATE,
    ),
    date_fields=frozenset({"preferredDates"}),
)


FORM_TYPES: Dict[str, FormType] = {
    form.key: form
    for form in (
        WEDDING_STYLING,
        PHOTOSHOOT_STYLING,
        PERSONALIZED_STYLING,
        MAKEUP_TRAINING,
        SOFT_SKILLS,
        CORPORATE_STYLING,
    )
}
