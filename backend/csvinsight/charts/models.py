"""
Chart insight models.

An insight is what the generative collaborator returns for one chart: a chart
type, a short summary, the rows to plot and optional axis hints.
"""
from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ChartValue = Union[str, float, int]
ChartRecord = Dict[str, ChartValue]


class ChartType(str, Enum):
    """Supported chart types."""
    BAR = "bar_chart"
    PIE = "pie_chart"
    LINE = "line_chart"


class ChartRepresentation(BaseModel):
    """Axis hints; any of them may be missing or name a field that does not exist."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    x_axis: Optional[str] = None
    y_axis: Optional[str] = None
    data_key: Optional[str] = Field(default=None, alias="dataKey")
    name_key: Optional[str] = Field(default=None, alias="nameKey")


class ChartInsight(BaseModel):
    """One chart proposed for an uploaded file."""
    
    type: ChartType
    summary: str = ""
    data: List[ChartRecord] = Field(default_factory=list)
    chart_representation: ChartRepresentation = Field(default_factory=ChartRepresentation)


class ChartFieldSelection(BaseModel):
    """Resolved axis fields, or an explicit no-data marker."""
    
    model_config = ConfigDict(frozen=True)
    
    status: Literal["ok", "no_data"] = "ok"
    category_key: Optional[str] = None
    value_key: Optional[str] = None
    
    @classmethod
    def no_data(cls) -> "ChartFieldSelection":
        return cls(status="no_data")
    
    @property
    def has_data(self) -> bool:
        return self.status == "ok"


class PlotInstructions(BaseModel):
    """Everything a renderer needs to draw one insight."""
    
    type: ChartType
    summary: str = ""
    status: Literal["ok", "no_data"] = "ok"
    category_key: Optional[str] = None
    value_key: Optional[str] = None
    colors: List[str] = Field(default_factory=list)
    data: List[ChartRecord] = Field(default_factory=list)
