"""Schemas for applicant account requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from jobboard.models.applicant import Applicant


class SignUpRequest(BaseModel):
    """Sign-up payload. A temporary password is generated server-side."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstname")
    last_name: str = Field(default="", alias="lastname")
    email: str = Field(default="")


class LoginRequest(BaseModel):
    email: str = Field(default="")
    password: str = Field(default="")


class LoginResponse(BaseModel):
    """Token and current registration step returned on login."""

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="Base64-encoded bearer token")
    registration_step: str = Field(..., alias="registrationstep")


class UpdatePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    password: str = Field(default="", description="Current password")
    new_password: str = Field(default="", alias="newpassword")


class UpdateAccountRequest(BaseModel):
    """Sparse account patch: empty fields keep their stored value."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstname")
    last_name: str = Field(default="", alias="lastname")
    email: str = Field(default="")
    phone_number: str = Field(default="", alias="phonenumber")
    address: str = Field(default="")
    city: str = Field(default="")
    state: str = Field(default="")
    zipcode: str = Field(default="")


class DesiredCityRequest(BaseModel):
    city: str | None = None
    state: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    text: str | None = None


class UpdateJobPreferencesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    desired_cities: list[DesiredCityRequest] = Field(
        default_factory=list, alias="desiredcities"
    )


class AutocompleteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chars: str = Field(default="", description="Partial location text")


class MessageResponse(BaseModel):
    message: str


class ApplicantResponse(BaseModel):
    """Public view of an applicant. Never carries the password hash."""

    model_config = ConfigDict(populate_by_name=True)

    public_id: str = Field(..., alias="publicid")
    first_name: str = Field(..., alias="firstname")
    last_name: str = Field(..., alias="lastname")
    email: str
    phone_number: str = Field(default="", alias="phonenumber")
    address: str = ""
    city: str = ""
    state: str = ""
    zipcode: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    registration_step: str = Field(..., alias="registrationstep")

    @classmethod
    def from_model(cls, applicant: Applicant) -> "ApplicantResponse":
        """Build the response, replacing missing profile fields with defaults."""
        return cls(
            public_id=applicant.public_id,
            first_name=applicant.first_name,
            last_name=applicant.last_name,
            email=applicant.email,
            phone_number=applicant.phone_number or "",
            address=applicant.address or "",
            city=applicant.city or "",
            state=applicant.state or "",
            zipcode=applicant.zipcode or "",
            latitude=applicant.latitude or 0.0,
            longitude=applicant.longitude or 0.0,
            registration_step=applicant.registration_step,
        )
