# processdesk/cost/cost_service.py

from typing import Any, Dict, Iterable

from processdesk.schemas.cost_item_schema import CostItemRead


def summarize_costs(cost_items: Iterable[CostItemRead]) -> Dict[str, Any]:
    items = list(cost_items)
    total_budget = sum(item.budgeted for item in items)
    total_actual = sum(item.actual for item in items)

    breakdown = [
        {
            "category": item.category,
            "budgeted": item.budgeted,
            "actual": item.actual,
            # positive means over budget
            "variance": item.actual - item.budgeted,
            "percentage": round(item.budgeted / total_budget * 100, 1) if total_budget else 0.0,
        }
        for item in items
    ]

    return {
        "totalBudget": total_budget,
        "totalActual": total_actual,
        "totalRemaining": total_budget - total_actual,
        "variance": total_actual - total_budget,
        "utilizationRate": round(total_actual / total_budget * 100) if total_budget else 0,
        "breakdown": breakdown,
    }
