from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict

from contact_form.state import FormState

DEFAULT_TITLE = "Form Input Data"
SUBMIT_LABEL = "Submit"

FIRST_NAME_LABEL = "First Name"
LAST_NAME_LABEL = "Last Name"
PHONE_LABEL = "Phone Number"
EMAIL_LABEL = "Email"

NAME_REQUIRED = "First and last name are required"
PHONE_REQUIRED = "Phone number is required"
EMAIL_INVALID = "Enter a valid email"


class FieldView(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    value: str
    is_error: bool = False


class SummaryView(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_name: str
    phone: str
    email: str

    def lines(self) -> Iterator[str]:
        yield f"Full Name: {self.full_name}"
        yield f"Phone: {self.phone}"
        yield f"Email: {self.email}"


class FormView(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    submit_label: str = SUBMIT_LABEL
    fields: List[FieldView]
    errors: List[str]
    summary: Optional[SummaryView] = None


def error_messages(state: FormState) -> List[str]:
    errors: List[str] = []
    if not state.is_valid_name:
        errors.append(NAME_REQUIRED)
    if not state.is_valid_phone:
        errors.append(PHONE_REQUIRED)
    if not state.is_valid_email:
        errors.append(EMAIL_INVALID)
    return errors


def present(state: FormState, title: str = DEFAULT_TITLE) -> FormView:
    """Project a form state onto what a screen shows for it."""
    fields = [
        FieldView(
            name="first_name",
            label=FIRST_NAME_LABEL,
            value=state.first_name,
            is_error=not state.is_valid_name,
        ),
        FieldView(
            name="last_name",
            label=LAST_NAME_LABEL,
            value=state.last_name,
            is_error=not state.is_valid_name,
        ),
        FieldView(
            name="phone",
            label=PHONE_LABEL,
            value=state.phone,
            is_error=not state.is_valid_phone,
        ),
        FieldView(
            name="email",
            label=EMAIL_LABEL,
            value=state.email,
            is_error=not state.is_valid_email,
        ),
    ]

    summary = None
    if state.has_summary:
        summary = SummaryView(
            full_name=state.full_name, phone=state.phone, email=state.email
        )

    return FormView(
        title=title,
        fields=fields,
        errors=error_messages(state),
        summary=summary,
    )
