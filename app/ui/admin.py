# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Freight Trip Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Admin Panel - principal management
"""

import streamlit as st

from utils.auth import UserDirectory, Role, ProtectedPrincipalError, current_principal
from utils.logging_config import setup_logger, for_principal

logger = setup_logger(__name__)


def render_admin_panel(directory: UserDirectory, texts):
    """List, create and delete principals."""
    audit = for_principal(logger, current_principal().username)

    if st.button(f"← {texts['back_to_calculator']}"):
        st.session_state.view = 'calculator'
        st.rerun()

    st.title(f"🛡️ {texts['manage_users_title']}")

    col_list, col_add = st.columns(2)

    with col_list:
        for principal in directory.list_principals():
            c1, c2 = st.columns([4, 1])
            with c1:
                badge = " `ADMIN`" if principal.is_admin else ""
                st.markdown(f"**{principal.username}**{badge}")
            with c2:
                if st.button("🗑️", key=f"del_user_{principal.username}", help=texts['delete_button']):
                    try:
                        if directory.delete_principal(principal.username):
                            audit.info(f"Admin panel removed principal {principal.username}")
                        st.rerun()
                    except ProtectedPrincipalError:
                        audit.warning("Admin panel refused to remove the admin principal")
                        st.error(texts['cannot_delete_admin'])

    with col_add:
        st.markdown(f"### {texts['add_user_title']}")
        with st.form("add_user", clear_on_submit=True):
            username = st.text_input(texts['username_label'])
            password = st.text_input(texts['password_label'], type="password")
            role = st.selectbox(texts['role_label'], options=[Role.USER, Role.ADMIN],
                                format_func=lambda r: r.value)
            submitted = st.form_submit_button(texts['create_user_button'], type="primary")

        if submitted:
            if not username or not password:
                st.error(texts['fill_all_fields'])
            elif directory.create_principal(username.strip(), password, role):
                audit.info(f"Admin panel added principal {username.strip()}")
                st.success(texts['user_created_success'])
            else:
                st.error(texts['user_exists'])
