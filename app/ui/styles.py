# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Freight Trip Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Application Styles and Design Tokens
"""

APP_STYLE = """
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&family=JetBrains+Mono:wght@400;500;700&display=swap');

    .block-container {
        padding-top: 3rem !important;
        padding-bottom: 3rem !important;
        max-width: 960px;
    }

    :root {
        --card-border: rgba(75, 125, 163, 0.35);
        --text-primary: #ecf3fa;
        --text-secondary: #a8b5c8;
        --accent-primary: #4B7DA3;
        --profit-color: #4ade80;
        --loss-color: #f87171;

        --font-primary: 'Inter', sans-serif;
        --font-mono: 'JetBrains Mono', monospace;

        --font-size-sm: 0.75rem;
        --font-size-lg: 1.1rem;
        --font-size-xl: 1.25rem;
    }

    .kpi-board {
        border: 1px solid rgba(60, 66, 75, 1) !important;
        border-radius: 10px;
        padding: 1rem;
        box-shadow: 0 4px 24px rgba(0, 0, 0, 0.2);
        margin-bottom: 2rem !important;
    }

    .kpi-header {
        font-family: var(--font-mono);
        font-size: var(--font-size-lg);
        font-weight: 600;
        color: var(--text-primary);
        margin-bottom: 0.75rem;
    }

    .kpi-grid {
        display: grid;
        grid-template-columns: repeat(3, 1fr);
        gap: 0.5rem;
        row-gap: 1rem;
    }

    .kpi-item {
        border-left: 1px solid rgba(90, 122, 143, 0.35) !important;
        padding: 0.25rem 0.85rem 0.25rem 1.25rem;
        min-height: 50px;
    }

    .kpi-label {
        font-family: var(--font-primary);
        font-size: var(--font-size-sm);
        color: var(--text-secondary);
        text-transform: uppercase;
        letter-spacing: 0.05em;
        margin-bottom: 2px;
    }

    .kpi-value {
        font-family: var(--font-mono);
        font-size: var(--font-size-xl);
        font-weight: 700;
        font-variant-numeric: tabular-nums;
    }

    .kpi-value.pos { color: var(--profit-color); }
    .kpi-value.neg { color: var(--loss-color); }

    .kpi-detail {
        font-size: var(--font-size-sm);
        color: var(--text-secondary);
    }

    @media (max-width: 640px) {
        .kpi-grid { grid-template-columns: repeat(2, 1fr); }
    }
</style>
"""
