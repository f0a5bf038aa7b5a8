"""
Booking submission records - one closed model per booking form
"""
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Union
from datetime import datetime, timezone
from enum import Enum

class SubmissionStatus(str, Enum):
    PENDING = "pending"

class Attachment(BaseModel):
    """A file captured from one attachment slot"""
    name: str
    type: str = "application/octet-stream"
    size: int = 0
    lastModified: int  # epoch milliseconds
    data: bytes

class SubmissionRecord(BaseModel):
    """Lifecycle fields shared by every booking form"""
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: SubmissionStatus = SubmissionStatus.PENDING

    class Config:
        extra = "ignore"
        use_enum_values = True

    def to_document(self) -> Dict[str, Any]:
        """Mongo document; absent optional fields and empty slots are left out"""
        return self.model_dump(exclude_none=True)

class WeddingStylingConsultation(SubmissionRecord):
    fullName: str = ""
    contactEmail: str = ""
    contactPhone: str = ""
    weddingLocation: str = ""
    weddingDate: str = ""
    package: str = ""
    events: List[str] = Field(default_factory=list)
    hasVendors: str = ""
    consultationMode: str = ""
    budgetRange: str = ""
    additionalNotes: Optional[str] = None
    inspirationImages: Optional[List[Attachment]] = None

class PhotoshootStylingRequest(SubmissionRecord):
    fullName: str = ""
    email: str = ""
    phone: str = ""
    photoshootType: str = ""
    location: str = ""
    preferredDate: str = ""
    hasPhotographer: str = ""
    stylingRequirements: str = ""
    needsHairMakeup: str = ""
    theme: Optional[str] = None
    # float only ever holds NaN for non-numeric input
    budgetRange: Union[int, float] = 0
    additionalNotes: Optional[str] = None
    references: Optional[List[Attachment]] = None

class PersonalizedStylingConsultation(SubmissionRecord):
    fullName: str = ""
    email: str = ""
    phone: str = ""
    consultationMode: str = ""
    ageGroup: str = ""
    gender: str = ""
    occupation: Optional[str] = None
    location: str = ""
    preferredDateTime: str = ""
    stylingGoals: List[str] = Field(default_factory=list)
    bodyConcerns: Optional[str] = None
    additionalNotes: Optional[str] = None
    images: Optional[List[Attachment]] = None

class MakeupTrainingConsultation(SubmissionRecord):
    fullName: str = ""
    contactEmail: str = ""
    contactPhone: str = ""
    consultationMode: str = ""
    trainingLocation: Optional[str] = None
    areaOfInterest: str = ""
    hasBackground: str = ""
    backgroundDetails: Optional[str] = None
    trainingReason: Optional[str] = None
    preferredLanguage: str = ""
    preferredDateTime: str = ""
    additionalQuestions: Optional[str] = None

class SoftSkillsCoachingRequest(SubmissionRecord):
    fullName: str = ""
    contactEmail: str = ""
    contactPhone: str = ""
    occupation: str = ""
    coachingPurpose: str = ""
    coachingMode: str = ""
    preferredDateTime: str = ""
    hasPreviousCoaching: str = ""
    preferredLanguage: str = ""
    additionalExpectations: Optional[str] = None

class CorporateStylingRequest(SubmissionRecord):
    companyName: str = ""
    contactPersonName: str = ""
    designation: str = ""
    contactInfo: str = ""
    numberOfParticipants: str = ""
    exactNumberOfParticipants: Optional[str] = None
    serviceType: str = ""
    industryType: str = ""
    otherIndustryType: Optional[str] = None
    companyLocation: str = ""
    preferredDates: Optional[datetime] = None
    serviceMode: str = ""
    dressCodeGuidelines: Optional[str] = None
    sessionObjectives: str = ""
    additionalNotes: Optional[str] = None

class SubmissionResponse(BaseModel):
    success: bool
    message: str
    id: Optional[str] = None
