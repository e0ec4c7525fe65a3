"""
Pydantic schemas for request and response validation.

Wire names are camelCase (`username`, `firstName`, `lastName`). Requests
also accept PascalCase and snake_case keys so clients serializing with
other conventions bind the same way.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from profile_service.entities import Profile, PutProfileRequest


class ProfileSchema(BaseModel):
    """Profile as sent and received over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("username", "Username"),
        serialization_alias="username",
    )
    first_name: str = Field(
        max_length=255,
        validation_alias=AliasChoices("firstName", "FirstName", "first_name"),
        serialization_alias="firstName",
    )
    last_name: str = Field(
        max_length=255,
        validation_alias=AliasChoices("lastName", "LastName", "last_name"),
        serialization_alias="lastName",
    )

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileSchema":
        return cls(
            username=profile.username,
            first_name=profile.first_name,
            last_name=profile.last_name,
        )

    def to_entity(self) -> Profile:
        return Profile(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class PutProfileRequestSchema(BaseModel):
    """
    Body of PUT /Profile/{username}.

    Only the names are read. A username key in the body is ignored; the
    path parameter is the sole identity.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str = Field(
        max_length=255,
        validation_alias=AliasChoices("firstName", "FirstName", "first_name"),
    )
    last_name: str = Field(
        max_length=255,
        validation_alias=AliasChoices("lastName", "LastName", "last_name"),
    )

    def to_entity(self) -> PutProfileRequest:
        return PutProfileRequest(first_name=self.first_name, last_name=self.last_name)


class ErrorResponse(BaseModel):
    detail: str
    status_code: int
