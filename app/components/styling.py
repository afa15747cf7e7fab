import streamlit as st

from shiftcal.models.rules import RULES, SHIFT_STYLES


def shift_css() -> str:
    """CSS classes ``shift-<label>`` generated from the shift styles."""
    css = "<style>\n"
    for label, style in SHIFT_STYLES.items():
        css += (
            f".shift-{label.value} {{ background-color: {RULES.card_background(label)} !important; "
            f"color: {RULES.card_text_color(label)}; "
            f"border-left: {RULES.card_border_width}px solid {style.color_hex}; }}\n"
        )

    css += """
    .shift-calendar { width: 100%; border-collapse: collapse; table-layout: fixed; }
    .shift-calendar th { text-align: center; padding: 4px; font-weight: bold; }
    .shift-calendar td { vertical-align: top; padding: 6px; height: 64px; border: 1px solid #f0f0f0; }
    .shift-calendar td.outside { opacity: 0.35; }
    .shift-calendar td.selected { outline: 2px solid #1890ff; }
    .shift-calendar td.today .day-number { color: #1890ff; font-weight: bold; }
    .shift-badge { display: inline-block; margin-top: 8px; padding: 0 6px; border-radius: 4px; font-size: 0.8rem; }
    .team-card { padding: 0.6rem 0.8rem; border-radius: 6px; margin: 0.25rem 0; }
    .team-card .team-name { font-size: 0.85rem; opacity: 0.8; }
    .team-card .shift-type { font-size: 1.2rem; font-weight: bold; }

    /* Hide Streamlit deploy button */
    .stDeployButton { display: none !important; }
    </style>
    """
    return css


def apply_styling():
    """Apply global CSS styling based on the shift styles."""
    st.markdown(shift_css(), unsafe_allow_html=True)
