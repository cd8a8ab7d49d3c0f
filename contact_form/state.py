from pydantic import BaseModel, ConfigDict, Field


class FormState(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = Field(default="", description="Raw first name input")
    last_name: str = Field(default="", description="Raw last name input")
    phone: str = Field(default="", description="Raw phone number input")
    email: str = Field(default="", description="Raw email input")

    full_name: str = Field(default="", description="Set by a submit with valid names")
    is_valid_name: bool = True
    is_valid_phone: bool = True
    is_valid_email: bool = True

    @property
    def has_summary(self) -> bool:
        return self.full_name != ""

    @property
    def is_valid(self) -> bool:
        return self.is_valid_name and self.is_valid_phone and self.is_valid_email
