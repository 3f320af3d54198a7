"""Chart plotting routes."""
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from csvinsight.charts.models import ChartInsight
from csvinsight.charts.plot import build_plot

router = APIRouter()


class PlotRequest(BaseModel):
    insights: List[ChartInsight]


@router.post("/plot")
def plot_insights(request: PlotRequest):
    """Resolve axis fields and colors for each insight."""
    return {
        "plots": [build_plot(insight).model_dump(mode="json") for insight in request.insights]
    }
