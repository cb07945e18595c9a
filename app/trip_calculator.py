# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Freight Trip Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Freight Trip Calculator - Streamlit Application

Trip profitability for road freight carriers:
- Revenue as flat freight amount or rate per km, in PLN or EUR
- Fuel, toll and service costs, corporate tax by residency
- Saved trip history with date filters and period summaries

Run with: streamlit run app/trip_calculator.py
"""

import sys
from pathlib import Path

# Fix module imports - add project root to path
_root = Path(__file__).parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st

from calculators.trip_models import Currency
from calculators.trip_calculator import compute_for_jurisdiction
from calculators.tax_calculators import get_jurisdiction
from calculators.trip_store import TripStore, create_trip_record
from calculators.trip_validator import validate_for_save, ValidationIssue
from core.blob_store import SQLiteBlobStore
from app.charts.visualizations import create_cost_breakdown_donut
from app.ui.admin import render_admin_panel
from app.ui.components import render_kpi_dashboard, build_results_metrics
from app.ui.history import render_history
from app.ui.i18n import get_texts
from app.ui.sidebar import render_sidebar_controls
from app.ui.styles import APP_STYLE
from utils.auth import UserDirectory, check_authentication, show_logout_button
from utils.config import load_config
from utils.logging_config import setup_logger, for_principal

logger = setup_logger(__name__)

st.set_page_config(
    page_title="Freight Trip Calculator",
    page_icon="🚚",
    layout="centered",
    initial_sidebar_state="expanded"
)

st.markdown(APP_STYLE, unsafe_allow_html=True)


@st.cache_resource
def get_services():
    """Storage-backed services, shared across reruns."""
    config = load_config()
    blob_store = SQLiteBlobStore(config.db_path, encryption_key=config.encryption_key)
    directory = UserDirectory(blob_store, admin_password=config.admin_password)
    return config, TripStore(blob_store), directory


def _validation_message(issue: ValidationIssue, texts) -> str:
    if issue.category == ValidationIssue.CATEGORY_DISTANCE:
        return texts['validation_distance']
    if issue.category == ValidationIssue.CATEGORY_REVENUE:
        return texts['validation_revenue']
    return texts['validation_other'].format(message=issue.message)


def render_header(principal, texts):
    col1, col2, col3 = st.columns([3, 1, 1])
    with col1:
        admin_badge = " `ADMIN`" if principal.is_admin else ""
        st.caption(f"👤 {texts['welcome_user'].format(name=principal.username)}{admin_badge}")
    with col2:
        if principal.is_admin and st.button(f"🛡️ {texts['admin_panel_button']}"):
            st.session_state.view = 'admin'
            st.rerun()
    with col3:
        if st.button(f"🌐 {texts['language_button']}"):
            st.session_state.lang = 'en' if st.session_state.lang == 'pl' else 'pl'
            st.rerun()

    st.title(f"🚚 {texts['header_title']}")
    st.caption(texts['header_subtitle'])


def main():
    """Main application entry point."""
    config, store, directory = get_services()

    if 'lang' not in st.session_state:
        st.session_state.lang = 'pl'
    if 'view' not in st.session_state:
        st.session_state.view = 'calculator'
    texts = get_texts(st.session_state.lang)

    principal = check_authentication(
        directory,
        title=texts['login_title'],
        username_label=texts['username_label'],
        password_label=texts['password_label'],
        button_label=texts['login_button'],
        error_message=texts['login_error'],
    )
    if principal is None:
        st.stop()

    show_logout_button(texts['logout_button'])

    if st.session_state.view == 'admin' and principal.is_admin:
        render_admin_panel(directory, texts)
        return

    render_header(principal, texts)

    # ==========================================
    # INPUTS & CALCULATION
    # ==========================================
    inputs = render_sidebar_controls(texts, config.rate_timeout_seconds)
    results = compute_for_jurisdiction(inputs)
    jurisdiction = get_jurisdiction(inputs.tax_residency)

    currency = Currency.EUR if inputs.is_euro_mode else Currency.PLN
    title = texts['results_title_eur'] if inputs.is_euro_mode else texts['results_title_pln']

    summary_metrics, cost_metrics = build_results_metrics(
        results, inputs, texts, jurisdiction.format_rate(), currency, inputs.exchange_rate
    )
    st.markdown(render_kpi_dashboard(summary_metrics, title=title), unsafe_allow_html=True)
    st.markdown(render_kpi_dashboard(cost_metrics, title=texts['costs_section_title']), unsafe_allow_html=True)

    donut = create_cost_breakdown_donut(
        results,
        labels=[m['label'] for m in cost_metrics[:3]] + [texts['total_net_profit_title']],
        currency=currency,
        exchange_rate=inputs.exchange_rate,
    )
    if donut.data:
        st.plotly_chart(donut, use_container_width=True)

    # ==========================================
    # SAVE
    # ==========================================
    if st.button(f"💾 {texts['save_trip_button']}", type="primary", use_container_width=True):
        issues = [issue for issue in validate_for_save(inputs) if issue.is_error]
        if issues:
            for issue in issues:
                st.warning(_validation_message(issue, texts))
        else:
            trip_date = st.session_state.trip_date
            record = create_trip_record(
                inputs,
                results,
                display_currency=currency,
                trip_date=trip_date.isoformat() if trip_date else None,
            )
            store.append(record)
            for_principal(logger, principal.username).info(f"Trip saved from calculator: {record.id}")
            st.success(texts['trip_saved'])

    st.divider()
    render_history(store, texts, currency, inputs.exchange_rate)


if __name__ == "__main__":
    main()
