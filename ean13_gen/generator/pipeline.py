from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ean13_gen.generator.forms import (
    WEIGHT_WIDTH,
    ValidationError,
    split_lines,
    validate_line,
    validate_weight,
)

_BODY_PREFIX = "21"


@dataclass(frozen=True)
class BatchResult:
    ok: bool
    codes: tuple[str, ...] = ()
    error: ValidationError | None = None


def encode_weight(body12: str, weight: str) -> str:
    """Write a zero-padded weight into the variable field of a 12-digit body."""
    product_number = body12[2:7]
    return f"{_BODY_PREFIX}{product_number}{weight.zfill(WEIGHT_WIDTH)}"


def calculate_checksum(body12: str) -> int:
    """EAN-13 check digit: weights 1 and 3 alternate from the leftmost digit."""
    total = 0
    for i, digit in enumerate(body12):
        total += int(digit) if i % 2 == 0 else int(digit) * 3
    return (10 - (total % 10)) % 10


def process(lines: str | Iterable[str], weight: str | None = "", keep_label: bool = True) -> BatchResult:
    """Turn a batch of partial barcodes into complete EAN-13 codes.

    ``lines`` is either pasted text or a sequence of lines. Blank lines are
    ignored. The whole batch fails on the first invalid line, and no codes
    are returned in that case.

    With ``keep_label=False`` a weighted code loses its "-label" suffix.
    """
    weight_check = validate_weight(weight)
    if not weight_check.ok:
        return BatchResult(ok=False, error=weight_check.error)
    weight_value = weight_check.value or ""

    if isinstance(lines, str):
        candidates = split_lines(lines)
    else:
        candidates = [line.strip() for line in lines if line and line.strip()]

    codes: list[str] = []
    for line in candidates:
        validation = validate_line(line)
        if not validation.ok:
            return BatchResult(ok=False, error=validation.error)

        body = validation.body or ""
        label = validation.label or ""
        if weight_value:
            body = encode_weight(body, weight_value)
            if not keep_label:
                label = ""

        codes.append(f"{body}{label}{calculate_checksum(body)}")

    return BatchResult(ok=True, codes=tuple(codes))
