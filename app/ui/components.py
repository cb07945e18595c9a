# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Freight Trip Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Reusable UI Components
"""

from html import escape

from app.ui.utils import format_result_currency, format_unit_rate, format_distance, format_money
from calculators.trip_models import Currency


def render_kpi_dashboard(metrics, title=None):
    """
    Render a KPI board as a single HTML block using CSS Grid.
    metrics: List of dicts with 'label', 'value', 'detail' (opt), 'tone' (opt: 'pos' | 'neg')
    """
    items_html = ""
    for m in metrics:
        tone = f" {m['tone']}" if m.get('tone') else ""
        detail_html = f'<div class="kpi-detail">{escape(m["detail"])}</div>' if m.get('detail') else ""
        items_html += '<div class="kpi-item">'
        items_html += f'<div class="kpi-label">{escape(m["label"])}</div>'
        items_html += f'<div class="kpi-value{tone}">{escape(m["value"])}</div>'
        items_html += detail_html
        items_html += '</div>'

    # Single line so Markdown does not treat it as a code block
    html = '<div class="kpi-board">'
    if title:
        html += f'<div class="kpi-header">{escape(title)}</div>'
    html += f'<div class="kpi-grid">{items_html}</div></div>'
    return html


def _tone(value):
    return 'pos' if value >= 0 else 'neg'


def build_results_metrics(results, inputs, texts, tax_rate_label, currency, exchange_rate):
    """
    KPI entries of the results panel, amounts converted to the display currency.

    Returns:
        (summary_metrics, cost_metrics)
    """
    def money(value):
        return format_result_currency(value, currency, exchange_rate)

    summary = [
        {'label': texts['total_revenue_title'], 'value': money(results.total_revenue)},
        {'label': texts['distance_display_label'], 'value': format_distance(results.distance_km)},
        {'label': texts['earnings_before_tax_title'], 'value': money(results.earnings_before_tax),
         'tone': _tone(results.earnings_before_tax)},
        {'label': texts['tax_cost_title'].format(rate=tax_rate_label), 'value': money(results.tax_cost)},
        {'label': texts['total_net_profit_title'], 'value': money(results.total_net_profit),
         'tone': 'pos' if results.is_profitable else 'neg'},
        {'label': texts['net_profit_per_km_title'],
         'value': format_unit_rate(results.net_profit_per_km, 'km', currency, exchange_rate),
         'tone': _tone(results.net_profit_per_km)},
    ]

    costs = [
        {'label': texts['cost_fuel'].format(
            rate=format_unit_rate(results.fuel_price_per_liter, 'l', currency, exchange_rate),
            consumption=f"{inputs.fuel_consumption_l_per_100km:g}"),
         'value': money(results.total_fuel_cost)},
        {'label': texts['cost_toll'].format(
            rate=format_unit_rate(results.toll_cost_per_km, 'km', currency, exchange_rate)),
         'value': money(results.total_toll_cost)},
        {'label': texts['cost_service'].format(
            rate=format_unit_rate(results.service_cost_per_km, 'km', currency, exchange_rate)),
         'value': money(results.total_service_cost)},
        {'label': texts['total_op_cost_title'], 'value': money(results.total_operational_cost)},
        {'label': texts['suggested_price_title'], 'value': money(results.suggested_price),
         'detail': format_money(results.suggested_price, Currency.PLN) if Currency(currency) != Currency.PLN else None},
    ]

    return summary, costs
