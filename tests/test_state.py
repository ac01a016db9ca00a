import pytest


@pytest.fixture()
def state_module(app):
    from ean13_gen.generator import state

    return state


@pytest.fixture()
def clipboard_module(app):
    from ean13_gen.generator import clipboard

    return clipboard


def test_weight_change_keeps_previous_value_on_error(state_module):
    state = state_module.GeneratorState(weight="42")
    state_module.on_weight_change(state, "1234567")
    assert state.weight == "42"
    assert state.error_message == "Weight should not exceed 5 digits."

    state_module.on_weight_change(state, "7")
    assert state.weight == "7"
    assert state.error_message == ""


def test_generate_success_replaces_codes(state_module):
    state = state_module.GeneratorState(barcode_list="211234500000", copied_index=0, generated_codes=["x"])
    result = state_module.on_generate(state)
    assert result.ok
    assert state.generated_codes == ["2112345000008"]
    assert state.copied_index is None


def test_load_state_tolerates_malformed_session(app, state_module):
    with app.test_request_context():
        from flask import session

        session["generator_state"] = {"generated_codes": "nope", "copied_index": 3}
        state = state_module.load_state()
        assert state.generated_codes == []
        assert state.copied_index is None

        session["generator_state"] = "garbage"
        assert state_module.load_state() == state_module.GeneratorState()


def test_copy_code_uses_injected_sink(state_module, clipboard_module, clipboard):
    state = state_module.GeneratorState(generated_codes=["2112345000008", "2198765000002"])
    assert clipboard_module.copy_code(state, 1, clipboard) == "2198765000002"
    assert clipboard.copied == ["2198765000002"]
    assert state.copied_index == 1

    with pytest.raises(IndexError):
        clipboard_module.copy_code(state, 2, clipboard)


def test_copy_all_joins_with_newlines(state_module, clipboard_module, clipboard):
    state = state_module.GeneratorState(generated_codes=["a", "b"], copied_index=0)
    clipboard_module.copy_all(state, clipboard)
    assert clipboard.copied == ["a\nb"]
    assert state.copied_index == 0
