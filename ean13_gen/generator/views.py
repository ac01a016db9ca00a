from __future__ import annotations

from flask import Blueprint, abort, current_app, render_template, request

from ean13_gen import log_message
from ean13_gen.generator.clipboard import SessionClipboard, copy_all, copy_code
from ean13_gen.generator.state import (
    GeneratorState,
    load_state,
    on_generate,
    on_input_change,
    on_weight_change,
    save_state,
)

# blueprint router configuration
generator = Blueprint("generator", __name__)


def _page_context(state: GeneratorState, clipboard_text: str | None = None) -> dict:
    return {
        "barcode_list": state.barcode_list,
        "weight": state.weight,
        "codes": state.generated_codes,
        "error_message": state.error_message,
        "copied_index": state.copied_index,
        "clipboard_text": clipboard_text,
    }


def _render_result(state: GeneratorState):
    save_state(state)
    return (
        render_template(
            "result_fragment.html",
            **_page_context(state, clipboard_text=SessionClipboard.pending()),
        ),
        200,
    )


@generator.route("/", methods=["GET"])
def index():
    """Route to display the home page of the application"""

    state = load_state()
    return render_template("index.html", **_page_context(state))


@generator.route("/barcodes", methods=["POST"])
def barcodes_changed():
    state = on_input_change(load_state(), request.form.get("barcodes"))
    return _render_result(state)


@generator.route("/weight", methods=["POST"])
def weight_changed():
    state = on_weight_change(load_state(), request.form.get("weight"))
    if state.error_message:
        current_app.logger.info(log_message(f"Rejected weight input: {request.form.get('weight')!r}"))
    return _render_result(state)


@generator.route("/generate", methods=["POST"])
def generate():
    state = load_state()
    # HTMX posts the whole form; plain API callers may rely on what is already in the session.
    if "barcodes" in request.form:
        on_input_change(state, request.form.get("barcodes"))
    if "weight" in request.form:
        on_weight_change(state, request.form.get("weight"))
        if state.error_message:
            return _render_result(state)

    result = on_generate(state, keep_label=current_app.config.get("KEEP_LABEL_ON_WEIGHT", True))
    if result.ok:
        current_app.logger.info(log_message(f"Generated {len(result.codes)} code(s)"))
    else:
        current_app.logger.info(log_message(f"Generation failed: {state.error_message}"))
    return _render_result(state)


@generator.route("/copy/<int:index>", methods=["POST"])
def copy_one(index: int):
    state = load_state()
    try:
        code = copy_code(state, index, SessionClipboard())
    except IndexError:
        abort(404, description=f"No generated code at position {index}.")
    current_app.logger.debug(log_message(f"Copied code {code}"))
    return _render_result(state)


@generator.route("/copy-all", methods=["POST"])
def copy_everything():
    state = load_state()
    copy_all(state, SessionClipboard())
    current_app.logger.debug(log_message(f"Copied {len(state.generated_codes)} code(s)"))
    return _render_result(state)
