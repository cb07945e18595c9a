# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Freight Trip Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Trip History Panel

Saved trips with date filters, period summary, profit chart and
load / delete actions.
"""

import streamlit as st

from calculators.history import filter_trips, summarize, effective_date, trips_to_dataframe
from calculators.trip_store import TripStore
from app.charts.visualizations import create_profit_history_chart
from app.ui.components import render_kpi_dashboard
from app.ui.sidebar import apply_inputs_to_session
from app.ui.utils import format_result_currency, format_distance
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


def _clear_filters():
    st.session_state.filter_start = None
    st.session_state.filter_end = None


def _load_trip(record):
    apply_inputs_to_session(record.inputs, record.trip_date)
    logger.info(f"Trip loaded into calculator: {record.id}")


def _delete_trip(store: TripStore, trip_id: str):
    store.delete_by_id(trip_id)


def _clear_history(store: TripStore):
    store.clear()
    _clear_filters()
    logger.info("Trip history cleared from history panel")


def render_history(store: TripStore, texts, currency, exchange_rate: float):
    """Render the history section below the results, amounts in the display currency."""
    st.markdown(f"## {texts['history_title']}")

    records = store.load_all()
    if not records:
        st.info(texts['no_history'])
        return

    st.session_state.setdefault('filter_start', None)
    st.session_state.setdefault('filter_end', None)

    col1, col2, col3, col4 = st.columns([2, 2, 1, 1])
    with col1:
        start = st.date_input(texts['filter_date_from'], key='filter_start')
    with col2:
        end = st.date_input(texts['filter_date_to'], key='filter_end')
    with col3:
        st.button(texts['clear_filters'], on_click=_clear_filters)
    with col4:
        st.button(texts['clear_history'], on_click=_clear_history, args=(store,))

    start_str = start.isoformat() if start else None
    end_str = end.isoformat() if end else None
    filtered = filter_trips(records, start_str, end_str)
    if not filtered:
        st.info(texts['no_filter_results'])
        return
    summary = summarize(filtered)

    title = texts['period_summary_title'] if (start_str or end_str) else texts['all_history_summary_title']
    st.markdown(render_kpi_dashboard([
        {'label': texts['period_total_profit'],
         'value': format_result_currency(summary.total_profit, currency, exchange_rate),
         'tone': 'pos' if summary.total_profit >= 0 else 'neg'},
        {'label': texts['period_total_distance'], 'value': format_distance(summary.total_distance_km)},
        {'label': '#', 'value': str(summary.trip_count)},
    ], title=title), unsafe_allow_html=True)

    history_df = trips_to_dataframe(filtered)
    if not history_df.empty:
        st.plotly_chart(create_profit_history_chart(history_df), use_container_width=True)

    for record in filtered:
        profit = record.summary.total_net_profit
        icon = "🟢" if profit >= 0 else "🔴"
        distance = record.inputs.distance_km or 0.0

        col1, col2, col3 = st.columns([5, 1, 1])
        with col1:
            st.markdown(
                f"{icon} **{effective_date(record)}** · {format_distance(distance)} · "
                f"{record.inputs.tax_residency} · **{format_result_currency(profit, currency, exchange_rate)}**"
            )
        with col2:
            st.button(texts['load_button'], key=f"load_{record.id}", on_click=_load_trip, args=(record,))
        with col3:
            st.button("🗑️", key=f"del_{record.id}", help=texts['delete_button'],
                      on_click=_delete_trip, args=(store, record.id))
