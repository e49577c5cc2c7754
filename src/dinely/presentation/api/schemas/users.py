"""User schemas for request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from dinely.domain.user import NotificationSettings, PriceRange, UserPreferences


class PriceRangeSchema(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    min: float = Field(default=0, description="Lowest price the user considers")
    max: float = Field(default=1000, description="Highest price the user considers")


class NotificationSettingsSchema(BaseModel):
    email: bool = True
    sms: bool = False
    push: bool = True


class PreferencesSchema(BaseModel):
    """Dining preferences; omitted fields take their defaults."""

    cuisine_types: list[str] = Field(default_factory=list)
    dietary_restrictions: list[str] = Field(default_factory=list)
    price_range: PriceRangeSchema = Field(default_factory=PriceRangeSchema)
    preferred_locations: list[str] = Field(default_factory=list)
    notifications: NotificationSettingsSchema = Field(
        default_factory=NotificationSettingsSchema,
    )
    language: str = "en"
    timezone: str = "UTC"

    model_config = ConfigDict(from_attributes=True)

    def to_domain(self) -> UserPreferences:
        """Build the value object; raises InvalidPreferencesError on bad ranges."""
        return UserPreferences(
            cuisine_types=tuple(self.cuisine_types),
            dietary_restrictions=tuple(self.dietary_restrictions),
            preferred_locations=tuple(self.preferred_locations),
            price_range=PriceRange(min=self.price_range.min, max=self.price_range.max),
            notifications=NotificationSettings(
                email=self.notifications.email,
                sms=self.notifications.sms,
                push=self.notifications.push,
            ),
            language=self.language,
            timezone=self.timezone,
        )


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="Password (8+ characters, 72 bytes max)")
    name: str = Field(..., description="Display name")
    phone: str = Field(..., description="Phone number, 10+ digits")
    preferences: Optional[PreferencesSchema] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john.doe@example.com",
                "password": "StrongPassword123!",
                "name": "John Doe",
                "phone": "+1234567890",
                "preferences": {
                    "cuisine_types": ["italian", "japanese"],
                    "dietary_restrictions": ["vegetarian"],
                    "price_range": {"min": 20, "max": 100},
                    "language": "en",
                },
            },
        },
    )


class UpdateProfileRequest(BaseModel):
    """Request schema for updating the current user's profile."""

    name: str
    phone: str
    preferences: Optional[PreferencesSchema] = Field(
        default=None,
        description="Replaces all preferences when present; kept when omitted",
    )


class ChangeEmailRequest(BaseModel):
    email: EmailStr


class UserResponse(BaseModel):
    """Response schema for user data."""

    id: UUID
    email: str
    name: str
    phone: str
    preferences: PreferencesSchema
    created_at: datetime
    updated_at: datetime
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class CreatedUserResponse(BaseModel):
    """Response schema for a newly registered user."""

    id: UUID
    email: str
    name: str
    phone: str
    preferences: PreferencesSchema
    created_at: datetime
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class UserPreferencesResponse(BaseModel):
    user_id: UUID
    preferences: PreferencesSchema


class UserListResponse(BaseModel):
    """A page of active users."""

    users: list[UserResponse]
    total: int
    limit: int
    offset: int

    model_config = ConfigDict(from_attributes=True)


class UserStatsResponse(BaseModel):
    user_id: UUID
    total_reservations: int
    active_reservations: int
    cancelled_reservations: int
    last_login_at: Optional[datetime]
    member_since: datetime

    model_config = ConfigDict(from_attributes=True)
