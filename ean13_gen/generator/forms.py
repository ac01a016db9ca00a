from __future__ import annotations

import enum
import re
from dataclasses import dataclass


BARCODE_SHAPE = (
	"Barcode must start with '21' followed by exactly 10 digits "
	"and optionally a product name separated by a dash."
)
WEIGHT_ERROR = "Weight should not exceed 5 digits."

WEIGHT_WIDTH = 5

# "21" + 5-digit product number + 5-digit variable field, then an optional "-label".
_LINE_RE = re.compile(r"(?P<body>21(?P<product>[0-9]{5})[0-9]{5})(?P<label>-.+)?")
_WEIGHT_RE = re.compile(r"[0-9]{1,%d}" % WEIGHT_WIDTH)


class ErrorKind(str, enum.Enum):
	format = "format"
	range = "range"


@dataclass(frozen=True)
class ValidationError:
	kind: ErrorKind
	line: str | None
	message: str


@dataclass(frozen=True)
class LineValidationResult:
	ok: bool
	body: str | None = None
	product_number: str | None = None
	label: str | None = None
	error: ValidationError | None = None


@dataclass(frozen=True)
class WeightValidationResult:
	ok: bool
	value: str | None = None
	error: ValidationError | None = None


def split_lines(raw: str | None) -> list[str]:
	"""Split pasted text into candidate lines, dropping blank ones."""
	if not raw:
		return []
	return [line.strip() for line in raw.splitlines() if line.strip()]


def validate_line(line: str) -> LineValidationResult:
	match = _LINE_RE.fullmatch(line)
	if match is None:
		return LineValidationResult(
			ok=False,
			error=ValidationError(
				kind=ErrorKind.format,
				line=line,
				message=f"Invalid barcode: {line}. {BARCODE_SHAPE}",
			),
		)

	return LineValidationResult(
		ok=True,
		body=match.group("body"),
		product_number=match.group("product"),
		label=match.group("label"),
	)


def validate_weight(raw: str | None) -> WeightValidationResult:
	value = (raw or "").strip()
	if not value:
		return WeightValidationResult(ok=True, value="")
	if not _WEIGHT_RE.fullmatch(value):
		return WeightValidationResult(
			ok=False,
			error=ValidationError(kind=ErrorKind.range, line=None, message=WEIGHT_ERROR),
		)

	return WeightValidationResult(ok=True, value=value)
