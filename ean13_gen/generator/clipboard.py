from __future__ import annotations

from typing import Protocol

from flask import session

from ean13_gen.generator.state import GeneratorState

_SESSION_KEY = "clipboard"


class ClipboardSink(Protocol):
    def copy(self, text: str) -> None: ...


class SessionClipboard:
    """Parks the copied text in the session; the page script writes it to the browser clipboard."""

    def copy(self, text: str) -> None:
        session[_SESSION_KEY] = text

    @staticmethod
    def pending() -> str | None:
        return session.pop(_SESSION_KEY, None)


def copy_code(state: GeneratorState, index: int, sink: ClipboardSink) -> str:
    if not 0 <= index < len(state.generated_codes):
        raise IndexError(f"No generated code at position {index}")
    code = state.generated_codes[index]
    sink.copy(code)
    state.copied_index = index
    return code


def copy_all(state: GeneratorState, sink: ClipboardSink) -> str:
    text = "\n".join(state.generated_codes)
    sink.copy(text)
    return text
