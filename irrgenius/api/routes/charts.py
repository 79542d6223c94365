"""Chart routes: plotly figure JSON for a growth series."""

import json

from fastapi import APIRouter

from irrgenius.api.schemas import GrowthChartRequest
from irrgenius.charts import growth_chart
from irrgenius.models.follow_on import InvestmentType
from irrgenius.models.results import GrowthPoint

router = APIRouter(prefix="/api/v1/charts", tags=["charts"])


@router.post("/growth")
async def growth_chart_figure(req: GrowthChartRequest) -> dict:
    points = [GrowthPoint(month=p.month, value=p.value) for p in req.points]
    markers = [(m, InvestmentType.BUY) for m in req.buy_months]
    markers += [(m, InvestmentType.SELL) for m in req.sell_months]
    fig = growth_chart(points, title=req.title, markers=sorted(markers, key=lambda m: m[0]))
    return json.loads(fig.to_json())
