from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import is_blank, month_dates
from ..common.numbers import parse_number, round2
from ..core.constants import MAX_OVERRIDE_HOURS
from ..core.enums import DayField, WarningCode
from .factory import DayStrategyFactory
from .model import Computed, DayRecord, DayWarning, Hours, Overridden
from .policy import PayrollPolicy

logger = logging.getLogger(__name__)

_OVERRIDE_FIELDS = (DayField.OVERTIME, DayField.SHORTFALL)


class DayCalculator:
    """Derive a day's classification, overtime and shortfall from its times.

    Every method returns a new ``DayRecord``; records are never mutated.
    """

    def __init__(self, policy: Optional[PayrollPolicy] = None, *, strategy_factory: Optional[DayStrategyFactory] = None):
        self._policy = policy or PayrollPolicy()
        self._factory = strategy_factory or DayStrategyFactory()

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def compute_day(self, record: DayRecord) -> DayRecord:
        """Recompute derived fields. Manual overrides are left as they are."""
        decision = self._factory.for_day(record).decide(record, self._policy)

        overtime: Hours = record.overtime
        if not overtime.overridden:
            overtime = Computed(round2(max(0, decision.overtime_minutes) / 60))
        shortfall: Hours = record.shortfall
        if not shortfall.overridden:
            shortfall = Computed(round2(max(0, decision.shortfall_minutes) / 60))

        kept = tuple(w for w in record.warnings if w.field in _OVERRIDE_FIELDS and self._is_overridden(record, w.field))
        if decision.warnings:
            logger.debug("day %s: %s", record.work_date, ", ".join(w.code.value for w in decision.warnings))

        return replace(
            record,
            overtime=overtime,
            shortfall=shortfall,
            classification=decision.classification,
            warnings=decision.warnings + kept,
        )

    def edit_times(self, record: DayRecord, *, in_time: Optional[str] = None, out_time: Optional[str] = None) -> DayRecord:
        """Apply new in/out tokens; any manual override is discarded."""
        updated = replace(
            record,
            in_time=record.in_time if in_time is None else str(in_time),
            out_time=record.out_time if out_time is None else str(out_time),
            overtime=Computed(),
            shortfall=Computed(),
            warnings=(),
        )
        return self.compute_day(updated)

    def override_overtime(self, record: DayRecord, value) -> DayRecord:
        return self._override(record, DayField.OVERTIME, value)

    def override_shortfall(self, record: DayRecord, value) -> DayRecord:
        return self._override(record, DayField.SHORTFALL, value)

    def materialize_month(self, year: int, month: int) -> list[DayRecord]:
        """One blank, computed record per calendar day, in calendar order."""
        return [self.compute_day(DayRecord(work_date=d)) for d in month_dates(year, month)]

    def _override(self, record: DayRecord, day_field: DayField, value) -> DayRecord:
        others = tuple(w for w in record.warnings if w.field != day_field)
        attr = day_field.value

        if is_blank(value):
            # Clearing the cell hands the field back to the calculator.
            cleared = replace(record, **{attr: Computed()}, warnings=others)
            return self.compute_day(cleared)

        hours = parse_number(value)
        warning = None
        if hours is None:
            warning = DayWarning(
                code=WarningCode.OVERRIDE_UNPARSEABLE,
                field=day_field,
                message=f"{value!r} is not a number; {attr} set to 0",
            )
            hours = 0.0
        elif hours < 0 or hours > MAX_OVERRIDE_HOURS:
            warning = DayWarning(
                code=WarningCode.OVERRIDE_OUT_OF_RANGE,
                field=day_field,
                message=f"{hours:g} is outside 0-{MAX_OVERRIDE_HOURS:g} hours; {attr} set to 0",
            )
            hours = 0.0

        if warning is not None:
            logger.debug("day %s: %s", record.work_date, warning.code.value)
            others = others + (warning,)
        return replace(record, **{attr: Overridden(round2(hours))}, warnings=others)

    @staticmethod
    def _is_overridden(record: DayRecord, day_field: DayField) -> bool:
        return getattr(record, day_field.value).overridden
