from contact_form.graph import SubmitGraphFactory
from contact_form.state import FormState


def test_graph_has_submit_nodes():
    g = SubmitGraphFactory().build()
    assert {"validate", "summarize", "clear"} <= set(g.nodes)


def test_run_valid_state_sets_full_name():
    graph = SubmitGraphFactory().compile()
    state = FormState(first_name="Ada", last_name="Lovelace", phone="1", email="a@b.c")

    out = SubmitGraphFactory.run(graph, state)

    assert isinstance(out, FormState)
    assert out.full_name == "Ada Lovelace"
    assert out.is_valid


def test_run_invalid_name_clears_previous_full_name():
    graph = SubmitGraphFactory().compile()
    state = FormState(first_name="", last_name="Lovelace", full_name="Ada Lovelace")

    out = SubmitGraphFactory.run(graph, state)

    assert out.is_valid_name is False
    assert out.full_name == ""
    assert out.last_name == "Lovelace"
