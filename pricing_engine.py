"""
Pricing Engine
==============
ROI calculator (annual productivity value vs. platform and training cost,
payback period, three-year projection) and the pricing page savings widget.

This module is unit-testable and can be used independently of Streamlit.
"""

from typing import Any, Dict, List, Optional

import pandas as pd

from catalog.pricing import (
    ADOPTION_GROWTH,
    CONSOLIDATION_RATE,
    DEFAULT_ROI_INPUTS,
    ENTERPRISE_SEAT_PRICE,
    HOURS_PER_YEAR,
    MAX_PAYBACK_MONTHS,
    PROFESSIONAL_PRICE,
    STARTER_PRICE,
    WIDGET_HOURLY_RATE,
    WIDGET_HOURS_SAVED_PER_EMPLOYEE,
    WORKING_WEEKS,
)
from rounding import round_half_up

ROI_INPUT_KEYS = list(DEFAULT_ROI_INPUTS)


def _inputs(inputs: Optional[Dict[str, float]]) -> Dict[str, float]:
    merged = dict(DEFAULT_ROI_INPUTS)
    if inputs:
        merged.update({k: v for k, v in inputs.items() if k in DEFAULT_ROI_INPUTS})
    return merged


def _annual_productivity(inputs: Dict[str, float], adoption_percentage: float) -> float:
    hourly_rate = inputs['average_salary'] / HOURS_PER_YEAR
    adopted = inputs['employees'] * (adoption_percentage / 100)
    return adopted * inputs['weekly_productivity_gain'] * WORKING_WEEKS * hourly_rate


def calculate_roi(inputs: Optional[Dict[str, float]] = None) -> Dict[str, float]:
    """
    Calculate first-year ROI.

    Args:
        inputs: employees, average_salary, adoption_percentage,
            weekly_productivity_gain, annual_platform_cost, training_cost.
            Missing keys take the calculator defaults.

    Returns:
        Dict with hourly_rate, annual_productivity_value, total_cost,
        net_benefit, roi_percentage and payback_months (capped at 999)
    """
    values = _inputs(inputs)
    hourly_rate = values['average_salary'] / HOURS_PER_YEAR
    productivity = _annual_productivity(values, values['adoption_percentage'])
    total_cost = values['annual_platform_cost'] + values['training_cost']
    net_benefit = productivity - total_cost
    roi_percentage = net_benefit / total_cost * 100 if total_cost > 0 else 0

    if productivity > 0:
        payback = min(total_cost / (productivity / 12), MAX_PAYBACK_MONTHS)
    else:
        payback = MAX_PAYBACK_MONTHS

    return {
        'hourly_rate': hourly_rate,
        'annual_productivity_value': productivity,
        'total_cost': total_cost,
        'net_benefit': net_benefit,
        'roi_percentage': roi_percentage,
        'payback_months': payback,
    }


def three_year_projection(inputs: Optional[Dict[str, float]] = None) -> List[Dict[str, float]]:
    """
    Project value over three years.

    Adoption compounds 15% a year, capped at 100%. Training is a year-one
    cost; the platform cost recurs every year.
    """
    values = _inputs(inputs)
    platform = values['annual_platform_cost']
    training = values['training_cost']
    projection = []

    for year in (1, 2, 3):
        adoption = min(values['adoption_percentage'] * ADOPTION_GROWTH ** (year - 1), 100)
        productivity = _annual_productivity(values, adoption)
        cost = platform + training if year == 1 else platform
        cumulative_cost = cost if year == 1 else cost + platform * (year - 1) + training
        cumulative_benefit = productivity * year
        projection.append({
            'year': year,
            'adoption': adoption,
            'productivity': productivity,
            'cost': cost,
            'cumulative_cost': cumulative_cost,
            'cumulative_benefit': cumulative_benefit,
            'net_value': cumulative_benefit - cumulative_cost,
        })
    return projection


def projection_frame(inputs: Optional[Dict[str, float]] = None) -> pd.DataFrame:
    return pd.DataFrame(three_year_projection(inputs))


def recommend_tier(team_size: int) -> Dict[str, Any]:
    if team_size > 50:
        return {'tier': 'Enterprise', 'monthly_cost': team_size * ENTERPRISE_SEAT_PRICE}
    if team_size > 10:
        return {'tier': 'Professional', 'monthly_cost': PROFESSIONAL_PRICE}
    return {'tier': 'Starter', 'monthly_cost': STARTER_PRICE}


def widget_savings(team_size: int, current_spend: float) -> Dict[str, Any]:
    """
    Monthly savings estimate for the pricing page widget.

    Args:
        team_size: Number of employees
        current_spend: Current monthly spend on fragmented AI tools

    Returns:
        Dict with productivity_savings, consolidation_savings,
        recommended_tier, tier_cost, total_monthly_savings, annual_savings,
        roi (whole percent) and hours_saved_total
    """
    productivity = team_size * WIDGET_HOURS_SAVED_PER_EMPLOYEE * WIDGET_HOURLY_RATE
    consolidation = current_spend * CONSOLIDATION_RATE
    tier = recommend_tier(team_size)
    tier_cost = tier['monthly_cost']

    total_monthly = productivity + consolidation - tier_cost
    roi = round_half_up(total_monthly / tier_cost * 100) if tier_cost > 0 else 0

    return {
        'productivity_savings': productivity,
        'consolidation_savings': consolidation,
        'recommended_tier': tier['tier'],
        'tier_cost': tier_cost,
        'total_monthly_savings': total_monthly,
        'annual_savings': total_monthly * 12,
        'roi': roi,
        'hours_saved_total': team_size * WIDGET_HOURS_SAVED_PER_EMPLOYEE,
    }
