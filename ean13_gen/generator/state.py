from __future__ import annotations

from dataclasses import asdict, dataclass, field

from flask import session

from ean13_gen.generator.forms import validate_weight
from ean13_gen.generator.pipeline import BatchResult, process

_SESSION_KEY = "generator_state"


@dataclass
class GeneratorState:
    """What the form shows: the textarea, the weight box, results and copy marker."""

    barcode_list: str = ""
    weight: str = ""
    generated_codes: list[str] = field(default_factory=list)
    error_message: str = ""
    copied_index: int | None = None


def load_state() -> GeneratorState:
    raw = session.get(_SESSION_KEY)
    if not isinstance(raw, dict):
        return GeneratorState()

    codes = raw.get("generated_codes")
    if not isinstance(codes, list):
        codes = []
    copied_index = raw.get("copied_index")
    if not isinstance(copied_index, int) or not 0 <= copied_index < len(codes):
        copied_index = None

    return GeneratorState(
        barcode_list=str(raw.get("barcode_list") or ""),
        weight=str(raw.get("weight") or ""),
        generated_codes=[str(code) for code in codes],
        error_message=str(raw.get("error_message") or ""),
        copied_index=copied_index,
    )


def save_state(state: GeneratorState) -> None:
    session[_SESSION_KEY] = asdict(state)


def on_input_change(state: GeneratorState, text: str | None) -> GeneratorState:
    state.barcode_list = text or ""
    state.error_message = ""
    return state


def on_weight_change(state: GeneratorState, raw: str | None) -> GeneratorState:
    validation = validate_weight(raw)
    if validation.ok:
        state.weight = validation.value or ""
        state.error_message = ""
    else:
        state.error_message = validation.error.message if validation.error else ""
    return state


def on_generate(state: GeneratorState, keep_label: bool = True) -> BatchResult:
    result = process(state.barcode_list, state.weight, keep_label=keep_label)
    if result.ok:
        state.generated_codes = list(result.codes)
        state.error_message = ""
        state.copied_index = None
    elif result.error is not None:
        # Previous results stay on screen next to the error.
        state.error_message = result.error.message
    return result
