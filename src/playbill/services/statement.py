"""StatementService — load invoices and plays, price them, render statements.

Pipeline: LOAD → PRICE → RENDER → RESPOND

Domain errors from the pricing core are mapped to error codes here; a
failure anywhere yields ``ok=False`` with no statement data.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from playbill.domain.errors import UnknownPlayError, UnknownPlayTypeError
from playbill.domain.pricing import DEFAULT_RULES, PricingRules
from playbill.domain.statement import build_statement_data
from playbill.infrastructure.loader import load_catalog, load_invoices
from playbill.output.currency import USD, CurrencyFormatter
from playbill.output.statement import render_text
from playbill.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from playbill.config.settings import PlaybillSettings
    from playbill.domain.models import Catalog, Invoice

logger = logging.getLogger(__name__)


def _failure(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    logger.warning("%s failed: %s", op, message)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class StatementService:
    """Produces billing statements as :class:`ServiceResult` payloads."""

    def __init__(
        self,
        rules: PricingRules = DEFAULT_RULES,
        formatter: CurrencyFormatter = USD,
    ) -> None:
        self._rules = rules
        self._formatter = formatter

    @classmethod
    def from_settings(cls, settings: PlaybillSettings) -> StatementService:
        return cls(rules=settings.pricing, formatter=settings.currency.formatter())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def statement_from_files(self, invoices_path: Path, plays_path: Path) -> ServiceResult:
        """Load both documents and render a statement per invoice."""
        op = "statement"

        # ── LOAD ─────────────────────────────────────────────
        path = plays_path
        try:
            catalog = load_catalog(path)
            path = invoices_path
            invoices = load_invoices(path)
        except FileNotFoundError as exc:
            return _failure(op, "NOT_FOUND", f"File not found: {exc.filename}", path=exc.filename)
        except UnicodeDecodeError as exc:
            return _failure(
                op,
                "INVALID_INPUT",
                f"{path.name} is not valid UTF-8: {exc.reason}",
                path=str(path),
            )
        except ValidationError as exc:
            return _failure(
                op,
                "INVALID_INPUT",
                f"Invalid document: {exc.error_count()} validation error(s)",
                path=str(path),
                errors=[err["msg"] for err in exc.errors()],
            )
        logger.debug(
            "Loaded %d play(s) from %s and %d invoice(s) from %s",
            len(catalog),
            plays_path,
            len(invoices),
            invoices_path,
        )
        return self.statement(invoices, catalog)

    def statement(self, invoices: Sequence[Invoice], catalog: Catalog) -> ServiceResult:
        """Render a statement for each invoice, in order.

        All invoices must price successfully; the first failure aborts the
        whole operation.
        """
        op = "statement"
        warnings: list[str] = []
        statements: list[dict[str, object]] = []

        for invoice in invoices:
            # ── PRICE ────────────────────────────────────────
            with structlog.contextvars.bound_contextvars(customer=invoice.customer):
                try:
                    data = build_statement_data(invoice, catalog, self._rules)
                except UnknownPlayTypeError as exc:
                    return _failure(op, "UNKNOWN_PLAY_TYPE", str(exc), play_type=exc.play_type)
                except UnknownPlayError as exc:
                    return _failure(op, "UNKNOWN_PLAY", str(exc), play_id=exc.play_id)

            if not data.lines:
                warnings.append(f"Invoice for {invoice.customer} has no performances")

            # ── RENDER ───────────────────────────────────────
            text = render_text(data, self._formatter)
            logger.debug(
                "Statement for %s: amount=%d credits=%d",
                data.customer,
                data.total_amount,
                data.total_volume_credits,
            )
            statements.append({**data.model_dump(mode="json"), "text": text})

        # ── RESPOND ──────────────────────────────────────────
        return ServiceResult(
            ok=True,
            op=op,
            data={"statements": statements},
            warnings=warnings,
        )
