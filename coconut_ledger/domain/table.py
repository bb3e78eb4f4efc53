"""Table view state - filter, sort and page selection as immutable values"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from coconut_ledger.domain.models import FilterMode, SortConfig
from coconut_ledger.domain.sorting import toggle_sort


@dataclass(frozen=True)
class TableState:
    """
    Table view state passed explicitly into the engines.

    Every transition returns a new state. Changing the filter or the sort
    sends the view back to page 1.
    """

    mode: FilterMode = FilterMode.ALL
    reference_date: date = field(default_factory=date.today)
    sort: SortConfig = field(default_factory=SortConfig)
    page_number: int = 1

    def with_filter(self, mode: FilterMode, reference_date: Optional[date] = None) -> "TableState":
        return replace(
            self,
            mode=mode,
            reference_date=reference_date or self.reference_date,
            page_number=1,
        )

    def with_sort(self, key: str) -> "TableState":
        return replace(self, sort=toggle_sort(self.sort, key), page_number=1)

    def with_page(self, page_number: int) -> "TableState":
        return replace(self, page_number=page_number)
