"""Data contract produced by the aggregation engine."""
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ColumnKind(str, Enum):
    """Inferred semantic type of a CSV column."""
    NUMBER = "number"
    DATE = "date"
    CATEGORY = "category"


class _Contract(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MonthCount(_Contract):
    month: str
    count: int


class ValueCount(_Contract):
    value: str
    count: int


class NumberSummary(_Contract):
    """Statistics over the cells that parsed as numbers."""
    
    type: Literal["number"] = "number"
    count: int = 0
    sum: float = 0.0
    mean: float = 0.0
    min: float = 0.0
    max: float = 0.0


class DateSummary(_Contract):
    """Monthly histogram plus the date range of a date column."""
    
    type: Literal["date"] = "date"
    by_month: List[MonthCount] = Field(default_factory=list, alias="byMonth")
    min_date: Optional[str] = Field(default=None, alias="minDate")
    max_date: Optional[str] = Field(default=None, alias="maxDate")


class CategorySummary(_Contract):
    """Frequency summary of a categorical column."""
    
    type: Literal["category"] = "category"
    distinct_count: int = Field(default=0, alias="distinctCount")
    top_values: List[ValueCount] = Field(default_factory=list, alias="topValues")


ColumnSummary = Annotated[
    Union[NumberSummary, DateSummary, CategorySummary],
    Field(discriminator="type"),
]


class Aggregates(_Contract):
    """
    Summary of one uploaded CSV file.
    
    ``columns`` holds exactly one entry per header, including columns with no
    values at all (those are summarized as categories).
    """
    
    headers: List[str] = Field(default_factory=list)
    row_count: int = Field(default=0, alias="rowCount")
    samples: List[Dict[str, str]] = Field(default_factory=list)
    columns: Dict[str, ColumnSummary] = Field(default_factory=dict)
    
    @property
    def is_empty(self) -> bool:
        return not self.headers
    
    def to_contract(self) -> dict:
        """JSON-ready dict with the camelCase keys consumers expect."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
