from typing import Literal

from contact_form.state import FormState


class FormValidator:
    """
    Submit rules for the contact form. Every method is a graph node or router:
    it takes the current FormState and returns a new one.
    """

    @staticmethod
    def is_blank(value: str) -> bool:
        return value.strip() == ""

    def validate_fields(self, state: FormState) -> FormState:
        valid_name = not self.is_blank(state.first_name) and not self.is_blank(
            state.last_name
        )
        valid_phone = not self.is_blank(state.phone)
        # Substring check only: "@." passes.
        valid_email = "@" in state.email and "." in state.email

        return state.model_copy(
            update={
                "is_valid_name": valid_name,
                "is_valid_phone": valid_phone,
                "is_valid_email": valid_email,
            }
        )

    @staticmethod
    def should_summarize(state: FormState) -> Literal["summarize", "clear"]:
        return "summarize" if state.is_valid_name else "clear"

    @staticmethod
    def compose_full_name(state: FormState) -> FormState:
        return state.model_copy(
            update={"full_name": f"{state.first_name} {state.last_name}"}
        )

    @staticmethod
    def clear_full_name(state: FormState) -> FormState:
        return state.model_copy(update={"full_name": ""})
