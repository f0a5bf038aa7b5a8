"""
User account schemas - notification preferences, sign-in providers, notifications
"""
from pydantic import AliasChoices, BaseModel, Field
from datetime import datetime
from enum import Enum

class AuthProvider(str, Enum):
    GOOGLE = "google"
    FACEBOOK = "facebook"
    AZURE_AD = "azure-ad"

# Key under connectedAccounts for each provider
CONNECTED_ACCOUNT_KEYS = {
    AuthProvider.GOOGLE.value: "google",
    AuthProvider.FACEBOOK.value: "facebook",
    AuthProvider.AZURE_AD.value: "microsoft",
}

class NotificationPreferencesUpdate(BaseModel):
    notificationsEnabled: bool

class ProviderDisconnect(BaseModel):
    # Checked in the route so an unknown provider is a 400, not a 422
    provider: str = ""

class MessageResponse(BaseModel):
    message: str

class NotificationResponse(BaseModel):
    # Read from the Mongo "_id", returned to clients as "id"
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    title: str
    message: str
    date: datetime
    read: bool = False

    class Config:
        populate_by_name = True
        json_encoders = {
            datetime: lambda v: v.isoformat()
        }
