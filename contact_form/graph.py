from typing import Any, Optional

from langgraph.graph import StateGraph, START, END

from contact_form.state import FormState
from contact_form.validator import FormValidator


class SubmitGraphFactory:
    def __init__(self, validator: Optional[FormValidator] = None):
        self.validator = validator or FormValidator()

    def build(self) -> StateGraph:
        g = StateGraph(FormState)

        g.add_node("validate", self.validator.validate_fields)
        g.add_node("summarize", self.validator.compose_full_name)
        g.add_node("clear", self.validator.clear_full_name)

        g.add_edge(START, "validate")

        g.add_conditional_edges(
            "validate",
            self.validator.should_summarize,
            {"summarize": "summarize", "clear": "clear"},
        )
        g.add_edge("summarize", END)
        g.add_edge("clear", END)

        return g

    def compile(self):
        return self.build().compile()

    @staticmethod
    def run(graph: Any, state: FormState) -> FormState:
        """
        Invoke a compiled submit graph. There is no checkpointer, so the whole
        current state is passed in and the final channel values come back.
        """
        result = graph.invoke(state.model_dump())
        if isinstance(result, FormState):
            return result
        return FormState.model_validate(dict(result))
