"""Read-only portfolio snapshot source backed by a JSON export."""

import json
from pathlib import Path

from src.domain.constants import STATUS_ACTIVE
from src.domain.models import (
    Cashflow,
    CashTransaction,
    Investment,
    Platform,
    PortfolioSnapshot,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import parse_iso_date
from src.utils.decimal_utils import coerce_decimal


def _field(record: dict, camel: str, snake: str, default=None):
    """Return a record value by its export (camel) or snake_case key."""
    if camel in record:
        return record[camel]
    return record.get(snake, default)


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


def _optional_id(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


class JsonPortfolioSnapshotSource:
    """Load portfolio records from a JSON data export.

    The export holds top-level ``platforms``, ``investments``,
    ``cashflows``, and ``cashTransactions`` arrays. Keys may be camelCase,
    as written by the export script, or snake_case.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def load_snapshot(self) -> PortfolioSnapshot:
        """Read and parse the export.

        Missing or null collections load as empty lists.

        Returns:
            PortfolioSnapshot: Parsed records.

        Raises:
            RuntimeError: If the file cannot be read, is not a JSON object,
                or holds a collection that is not a list of objects.
        """
        payload = self._read_payload()
        platforms = [
            self._parse_platform(row)
            for row in self._rows(payload, "platforms", "platforms")
        ]
        investments = [
            self._parse_investment(row)
            for row in self._rows(payload, "investments", "investments")
        ]
        cashflows = [
            cashflow
            for cashflow in (
                self._parse_cashflow(row)
                for row in self._rows(payload, "cashflows", "cashflows")
            )
            if cashflow is not None
        ]
        transactions = [
            self._parse_cash_transaction(row)
            for row in self._rows(
                payload, "cashTransactions", "cash_transactions"
            )
        ]
        self._logger.info(
            f"Loaded snapshot from {self._path}: "
            f"platforms={len(platforms)}, investments={len(investments)}, "
            f"cashflows={len(cashflows)}, cash_transactions={len(transactions)}"
        )
        return PortfolioSnapshot(
            investments=investments,
            cashflows=cashflows,
            cash_transactions=transactions,
            platforms=platforms,
        )

    def _read_payload(self) -> dict:
        if not self._path.exists():
            raise RuntimeError(f"Portfolio snapshot not found: {self._path}")
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RuntimeError(
                f"Portfolio snapshot could not be read: {self._path} ({exc})"
            ) from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Portfolio snapshot is not valid JSON: {self._path} ({exc})"
            ) from exc
        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Portfolio snapshot must be a JSON object: {self._path}"
            )
        return payload

    def _rows(self, payload: dict, camel: str, snake: str) -> list[dict]:
        rows = _field(payload, camel, snake) or []
        if not isinstance(rows, list) or not all(
            isinstance(row, dict) for row in rows
        ):
            raise RuntimeError(
                f"Portfolio snapshot field '{camel}' must be a list of "
                f"objects: {self._path}"
            )
        return rows

    @staticmethod
    def _parse_platform(row: dict) -> Platform:
        return Platform(
            id=str(row.get("id", "")),
            name=str(row.get("name") or ""),
            type=str(row.get("type") or ""),
        )

    def _parse_investment(self, row: dict) -> Investment:
        investment_id = str(row.get("id", ""))
        face_value = _field(row, "faceValue", "face_value")
        if face_value is None:
            face_value = row.get("amount")
        raw_profit = _field(row, "totalExpectedProfit", "total_expected_profit")
        platform_id = (
            _optional_id(_field(row, "platformId", "platform_id")) or ""
        )
        return Investment(
            id=investment_id,
            platform_id=platform_id,
            face_value=coerce_decimal(face_value),
            expected_irr=coerce_decimal(
                _field(row, "expectedIrr", "expected_irr")
            ),
            start_date=self._parse_date(
                _field(row, "startDate", "start_date"),
                f"investment {investment_id} startDate",
            ),
            end_date=self._parse_date(
                _field(row, "endDate", "end_date"),
                f"investment {investment_id} endDate",
            ),
            status=str(row.get("status") or STATUS_ACTIVE),
            total_expected_profit=(
                None if raw_profit is None else coerce_decimal(raw_profit)
            ),
            is_reinvestment=_flag(
                _field(row, "isReinvestment", "is_reinvestment", False)
            ),
            name=str(row.get("name") or ""),
            late_date=self._parse_date(
                _field(row, "lateDate", "late_date"),
                f"investment {investment_id} lateDate",
            ),
        )

    def _parse_cashflow(self, row: dict) -> Cashflow | None:
        cashflow_id = str(row.get("id", ""))
        investment_id = (
            _optional_id(_field(row, "investmentId", "investment_id")) or ""
        )
        due_date = self._parse_date(
            _field(row, "dueDate", "due_date"),
            f"cashflow {cashflow_id} dueDate",
        )
        if due_date is None:
            self._logger.warning(
                f"Skipping cashflow {cashflow_id} without a due date"
            )
            return None
        return Cashflow(
            id=cashflow_id,
            investment_id=investment_id,
            amount=coerce_decimal(row.get("amount")),
            due_date=due_date,
            status=str(row.get("status") or "upcoming"),
            type=str(row.get("type") or "profit"),
            received_date=self._parse_date(
                _field(row, "receivedDate", "received_date"),
                f"cashflow {cashflow_id} receivedDate",
            ),
        )

    @staticmethod
    def _parse_cash_transaction(row: dict) -> CashTransaction:
        return CashTransaction(
            id=str(row.get("id", "")),
            amount=coerce_decimal(row.get("amount")),
            type=str(row.get("type") or ""),
            platform_id=_optional_id(
                _field(row, "platformId", "platform_id")
            ),
        )

    def _parse_date(self, value, label: str):
        parsed = parse_iso_date(value)
        if parsed is None and value not in (None, ""):
            self._logger.warning(f"Ignoring invalid date for {label}: {value}")
        return parsed


__all__ = ["JsonPortfolioSnapshotSource"]
