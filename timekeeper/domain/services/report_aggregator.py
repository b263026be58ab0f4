"""Report aggregation.
Folds time entries into per-period statistics.
"""

from typing import Dict, Iterable

from timekeeper.domain.models.report import ReportStat
from timekeeper.domain.models.time_entry import TimeEntry


class ReportAggregator:
    """
    Domain service computing ReportStat values.
    One entry counts as one day; regular and overtime days always sum
    to the total.
    """

    def aggregate(self, entries: Iterable[TimeEntry]) -> ReportStat:
        stat = ReportStat()
        for entry in entries:
            self._add(stat, entry)
        return stat

    def aggregate_by_owner(self, entries: Iterable[TimeEntry]) -> Dict[int, ReportStat]:
        """
        Group by ``user_id``. Keys keep the order in which each owner first
        appears in ``entries``.
        """
        stats: Dict[int, ReportStat] = {}
        for entry in entries:
            if entry.user_id not in stats:
                stats[entry.user_id] = ReportStat()
            self._add(stats[entry.user_id], entry)
        return stats

    @staticmethod
    def _add(stat: ReportStat, entry: TimeEntry) -> None:
        hours = entry.hours
        stat.total_hours += hours
        stat.total_days += 1
        if entry.is_overtime:
            stat.overtime_days += 1
        else:
            stat.regular_days += 1
