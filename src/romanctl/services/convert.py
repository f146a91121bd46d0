"""ConvertService: decode, encode, batch convert, check, and table listing.

Wraps the pure functions in :mod:`romanctl.domain.numerals`. Domain errors
become ``ServiceResult(ok=False)``; nothing raised by a bad numeral or an
out-of-range integer escapes this layer.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from romanctl.config.models import ConvertConfig
from romanctl.domain.errors import DecodeError, EncodeError
from romanctl.domain.numerals import decode, encode
from romanctl.domain.symbols import MAX_VALUE, MIN_VALUE, iter_clusters
from romanctl.services.contracts import (
    CheckData,
    ConversionData,
    ConvertResultData,
    TableResultData,
    dump_validated,
)
from romanctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"^[+-]?\d+$")

# Longest digit run that can still fall inside MIN_VALUE..MAX_VALUE
_MAX_DIGITS = len(str(MAX_VALUE))

# Only the seven numeral letters fold; str.upper() would map "ı" to "I"
_FOLD_NUMERALS = str.maketrans("mdclxvi", "MDCLXVI")


class ConvertService:
    """Conversion operations configured by the ``[convert]`` section.

    Usage::

        svc = ConvertService(settings.convert)
        result = svc.decode("XLII")
        result.data["value"]  # 42
    """

    def __init__(self, config: ConvertConfig | None = None) -> None:
        self._config = config or ConvertConfig()

    # ── Normalization ──────────────────────────────────────────────────

    def _prepare_numeral(self, numeral: str) -> str:
        if self._config.strip_whitespace:
            numeral = numeral.strip()
        if not self._config.case_sensitive or self._config.lowercase:
            numeral = numeral.translate(_FOLD_NUMERALS)
        return numeral

    def _render_numeral(self, numeral: str) -> str:
        return numeral.lower() if self._config.lowercase else numeral

    # ── Operations ─────────────────────────────────────────────────────

    def decode(self, numeral: str) -> ServiceResult:
        """Decode a Roman numeral into its integer value."""
        op = "decode"
        prepared = self._prepare_numeral(numeral)
        try:
            value = decode(prepared)
        except DecodeError as exc:
            logger.debug("Rejected numeral %r (remainder %r)", prepared, exc.remainder)
            return ServiceResult.failure(
                op, exc.code, str(exc), numeral=prepared, remainder=exc.remainder
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(ConversionData, {"numeral": prepared, "value": value}),
        )

    def encode(self, value: int) -> ServiceResult:
        """Encode an integer as a canonical Roman numeral."""
        op = "encode"
        try:
            numeral = encode(value)
        except EncodeError as exc:
            logger.debug("Rejected value %d", value)
            return ServiceResult.failure(
                op, exc.code, str(exc), value=value, min=exc.minimum, max=exc.maximum
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                ConversionData, {"numeral": self._render_numeral(numeral), "value": value}
            ),
        )

    def _encode_token(self, token: str) -> ServiceResult:
        # Skip int() for long digit runs; it raises past sys.get_int_max_str_digits()
        if len(token.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
            logger.debug("Rejected %d-character integer token", len(token))
            return ServiceResult.failure(
                "encode",
                EncodeError.code,
                f"{len(token)}-character integer not in range {MIN_VALUE}..{MAX_VALUE}",
                min=MIN_VALUE,
                max=MAX_VALUE,
            )
        return self.encode(int(token))

    def convert(self, tokens: Iterable[str]) -> ServiceResult:
        """Convert each token in whichever direction it calls for.

        Integer-looking tokens are encoded, everything else is decoded.
        Per-token failures are collected rather than aborting the batch;
        the result fails only when no token converted.
        """
        op = "convert"
        items: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []
        warnings: list[str] = []

        for index, token in enumerate(tokens):
            stripped = token.strip() if self._config.strip_whitespace else token
            if _INTEGER_TOKEN.match(stripped):
                sub = self._encode_token(stripped)
                direction = "encode"
            else:
                sub = self.decode(token)
                direction = "decode"

            if sub.ok:
                items.append({"index": index, "input": token, "direction": direction, **sub.data})
            else:
                assert sub.error is not None
                errors.append(
                    {
                        "index": index,
                        "input": token,
                        "code": sub.error.code,
                        "error": sub.error.message,
                    }
                )
                warnings.append(f"#{index}: {sub.error.message}")

        if not items and not errors:
            return ServiceResult.failure(op, "NO_INPUT", "No tokens to convert")
        if not items:
            return ServiceResult.failure(
                op, "ALL_FAILED", f"All {len(errors)} tokens failed", errors=errors
            )

        data = dump_validated(
            ConvertResultData, {"count": len(items), "items": items, "errors": errors}
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def check(self, numeral: str) -> ServiceResult:
        """Report whether *numeral* is canonical. Never fails."""
        prepared = self._prepare_numeral(numeral)
        value: int | None
        try:
            value = decode(prepared)
        except DecodeError:
            value = None
        payload = {"numeral": prepared, "canonical": value is not None, "value": value}
        return ServiceResult(ok=True, op="check", data=dump_validated(CheckData, payload))

    def table(self) -> ServiceResult:
        """List every symbol cluster with its place and value."""
        items = [
            {"place": str(place), "symbol": self._render_numeral(c.symbol), "value": c.value}
            for place, c in iter_clusters()
        ]
        return ServiceResult(
            ok=True,
            op="table",
            data=dump_validated(TableResultData, {"count": len(items), "items": items}),
            meta={"min": MIN_VALUE, "max": MAX_VALUE},
        )
