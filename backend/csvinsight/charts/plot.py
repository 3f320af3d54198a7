"""Turn chart insights into renderer-ready plot instructions."""
import logging

from csvinsight.charts.colors import color_for
from csvinsight.charts.models import ChartInsight, ChartType, PlotInstructions
from csvinsight.charts.resolver import category_labels, resolve_for_insight

logger = logging.getLogger(__name__)


def build_plot(insight: ChartInsight) -> PlotInstructions:
    """
    Resolve axes and colors for one insight.
    
    Bar and pie charts get one color per datum, keyed on its label so the
    same category keeps its color everywhere. Line charts are a single
    series and get one color.
    """
    selection = resolve_for_insight(insight)
    if not selection.has_data:
        logger.info("Insight %r has no data to plot", insight.summary)
        return PlotInstructions(type=insight.type, summary=insight.summary, status="no_data")
    
    if insight.type is ChartType.LINE:
        colors = [color_for(None, 0)]
    else:
        labels = category_labels(insight.data, selection.category_key)
        colors = [color_for(label, index) for index, label in enumerate(labels)]
    
    return PlotInstructions(
        type=insight.type,
        summary=insight.summary,
        category_key=selection.category_key,
        value_key=selection.value_key,
        colors=colors,
        data=insight.data,
    )
