from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class Profile(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, from_attributes=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1, pattern=EMAIL_PATTERN)
    designation: str = ""
    phone: str = ""
    company: str = ""

    @field_validator("designation", "phone", "company", mode="before")
    @classmethod
    def none_as_empty(cls, value: object) -> object:
        return "" if value is None else value
