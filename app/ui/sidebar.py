# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Freight Trip Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

from datetime import date

import streamlit as st

from calculators.trip_models import (
    TripInputs, FlatAmount, PerKmRate,
    DEFAULT_EXCHANGE_RATE, DEFAULT_FUEL_PRICE_PER_LITER, DEFAULT_TOLL_COST_PER_KM,
    DEFAULT_SERVICE_COST_PER_KM, DEFAULT_FUEL_CONSUMPTION_L_PER_100KM, DEFAULT_TAX_RESIDENCY,
)
from calculators.tax_calculators import get_tax_table
from services.fx_rates import refresh_exchange_rate, fetch_eur_pln_rate
from app.ui.utils import format_money
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

# Widget keys holding the live calculator inputs
SESSION_DEFAULTS = {
    'trip_date': None,
    'distance': None,
    'is_rate_per_km_mode': False,
    'freight_amount': None,
    'rate_per_km': None,
    'is_euro_mode': False,
    'exchange_rate': DEFAULT_EXCHANGE_RATE,
    'fuel_price': DEFAULT_FUEL_PRICE_PER_LITER,
    'fuel_consumption': DEFAULT_FUEL_CONSUMPTION_L_PER_100KM,
    'toll_cost': DEFAULT_TOLL_COST_PER_KM,
    'service_cost': DEFAULT_SERVICE_COST_PER_KM,
    'tax_residency': DEFAULT_TAX_RESIDENCY,
    'rate_error': None,
}


def init_session_state():
    """Seed missing input keys with the calculator defaults."""
    for key, value in SESSION_DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = value
    if st.session_state.trip_date is None:
        st.session_state.trip_date = date.today()


def inputs_from_session() -> TripInputs:
    """Snapshot the widget state into an immutable TripInputs."""
    state = st.session_state
    if state.is_rate_per_km_mode:
        revenue = PerKmRate(rate=state.rate_per_km)
    else:
        revenue = FlatAmount(amount=state.freight_amount)

    return TripInputs(
        distance_km=state.distance,
        revenue=revenue,
        is_euro_mode=state.is_euro_mode,
        exchange_rate=state.exchange_rate,
        fuel_consumption_l_per_100km=state.fuel_consumption,
        fuel_price_per_liter=state.fuel_price,
        toll_cost_per_km=state.toll_cost,
        service_cost_per_km=state.service_cost,
        tax_residency=state.tax_residency,
    )


def apply_inputs_to_session(inputs: TripInputs, trip_date=None):
    """
    Put a saved trip back into the form.

    Must run as a widget callback: Streamlit forbids changing widget state
    after the widget has been drawn in the same run.
    """
    state = st.session_state
    if trip_date:
        state.trip_date = date.fromisoformat(trip_date)
    state.distance = inputs.distance_km
    state.is_rate_per_km_mode = inputs.is_rate_per_km_mode
    state.freight_amount = inputs.freight_amount
    state.rate_per_km = inputs.rate_per_km
    state.is_euro_mode = inputs.is_euro_mode
    state.exchange_rate = inputs.exchange_rate
    state.fuel_price = inputs.fuel_price_per_liter
    state.fuel_consumption = inputs.fuel_consumption_l_per_100km
    state.toll_cost = inputs.toll_cost_per_km
    state.service_cost = inputs.service_cost_per_km
    if inputs.tax_residency in get_tax_table():
        state.tax_residency = inputs.tax_residency
    else:
        logger.warning(f"Saved trip uses unknown tax residency {inputs.tax_residency}, keeping {state.tax_residency}")


def _refresh_rate_callback(timeout: float):
    result = refresh_exchange_rate(
        st.session_state.exchange_rate,
        fetcher=lambda: fetch_eur_pln_rate(timeout=timeout),
    )
    st.session_state.exchange_rate = result.rate
    st.session_state.rate_error = None if result.updated else result.rate


def render_currency_settings(texts, rate_timeout: float):
    """EUR mode toggle, current rate and refresh button."""
    st.markdown(f"### {texts['currency_settings_title']}")

    col1, col2 = st.columns([3, 1])
    with col1:
        st.toggle(texts['euro_mode_toggle'], key='is_euro_mode')
    with col2:
        st.button("🔄", help=texts['refresh_rate_title'], on_click=_refresh_rate_callback, args=(rate_timeout,))

    if st.session_state.rate_error is not None:
        st.error(texts['rate_fetch_error'].format(rate=f"{st.session_state.rate_error:.4f}"))

    st.caption(f"{texts['current_rate_label']} 1 EUR = {format_money(st.session_state.exchange_rate)}")


def render_trip_inputs(texts):
    """Trip date, distance and revenue inputs."""
    currency = 'EUR' if st.session_state.is_euro_mode else 'PLN'

    st.date_input(texts['trip_date_label'], key='trip_date')
    st.number_input(texts['distance_label'], min_value=0.0, step=10.0, key='distance', placeholder="500")

    st.toggle(texts['calc_mode_toggle'], key='is_rate_per_km_mode')
    if st.session_state.is_rate_per_km_mode:
        st.number_input(texts['rate_per_km_label'].format(currency=currency),
                        min_value=0.0, step=0.1, format="%.2f", key='rate_per_km', placeholder="4.00")
    else:
        st.number_input(texts['freight_amount_label'].format(currency=currency),
                        min_value=0.0, step=50.0, format="%.2f", key='freight_amount', placeholder="2000")


def render_cost_settings(texts):
    """Tax residency and per-unit costs (always PLN)."""
    tax_table = get_tax_table()

    with st.expander(texts['custom_costs_title'], expanded=False):
        st.caption(texts['custom_costs_hint'])
        st.selectbox(
            texts['tax_residency_label'],
            options=list(tax_table.keys()),
            format_func=lambda name: f"{tax_table[name].flag} {name} ({tax_table[name].rate * 100:g}%)",
            key='tax_residency',
        )
        st.number_input(texts['fuel_price_label'], min_value=0.0, step=0.05, format="%.2f", key='fuel_price')
        st.number_input(texts['fuel_consumption_label'], min_value=0.0, step=0.5, format="%.1f", key='fuel_consumption')
        st.number_input(texts['toll_cost_label'], min_value=0.0, step=0.01, format="%.2f", key='toll_cost')
        st.number_input(texts['service_cost_label'], min_value=0.0, step=0.01, format="%.2f", key='service_cost')


def render_sidebar_controls(texts, rate_timeout: float) -> TripInputs:
    """
    Render every calculator input in the sidebar.

    Returns:
        The current inputs as an immutable TripInputs
    """
    init_session_state()

    with st.sidebar:
        render_currency_settings(texts, rate_timeout)
        st.divider()
        render_trip_inputs(texts)
        render_cost_settings(texts)

    return inputs_from_session()
