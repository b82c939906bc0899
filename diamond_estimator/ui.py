from datetime import datetime
from typing import Dict, Optional
import streamlit as st

from .constants import (
    DIAMOND_OPTIONS, DEFAULT_DIAMOND, FIELD_LABELS, FACTOR_COLORS, DEFAULT_FACTOR_COLOR,
    CARAT_STEP, PROPORTION_STEP, CONFIDENCE_FRACTION,
)
from . import content
from .data import coefficient_frame
from .pricing import DiamondDescription, PricePrediction, breakdown_frame, carat_price_curve
from .utils import fmt_usd, fmt_percent
from .validation import validate_field


def inject_global_css():
    st.markdown("""
    <style>
    section.main > div.block-container {max-width: 1200px; padding-left: 2rem; padding-right: 2rem;}

    .de-topbar {
        display: flex;
        gap: 1rem;
        align-items: center;
        justify-content: space-between;
        padding: 0.6rem 0.8rem;
        border-radius: 12px;
        background: linear-gradient(180deg, rgba(250,250,252,0.9), rgba(245,245,249,0.9));
        border: 1px solid rgba(0,0,0,0.05);
        margin-bottom: 1rem;
    }
    .de-title { font-weight: 700; font-size: 1.05rem; }
    .de-tagline { font-size: 0.9rem; color: #5b5b66; margin-top: 0.15rem; }
    .de-links { display: flex; flex-wrap: wrap; gap: 0.5rem; justify-content: flex-end; }
    .de-chip {
        padding: 0.32rem 0.55rem;
        border-radius: 999px;
        border: 1px solid rgba(0,0,0,0.08);
        background: white;
        font-size: 0.85rem;
        text-decoration: none !important;
    }
    .de-chip:hover { background: #f6f7fb; }

    .de-estimate {
        padding: 1.5rem;
        text-align: center;
        border-radius: 8px;
        background: #7986cb;
        color: white;
        margin-bottom: 1.5rem;
    }
    .de-estimate .de-price { font-size: 2.6rem; font-weight: 700; }
    .de-bar { height: 10px; border-radius: 5px; background: rgba(0,0,0,0.05); }
    .de-bar > div { height: 10px; border-radius: 5px; }
    </style>
    """, unsafe_allow_html=True)


def top_navbar(title: str):
    chips = "\n".join(
        f'<a class="de-chip" href="{url}" target="_blank">{name}</a>'
        for name, url in content.NAV_LINKS.items()
    )
    st.markdown(f"""
    <div class="de-topbar">
      <div>
        <div class="de-title">💎 {title}</div>
        <div class="de-tagline">{content.APP_TAGLINE}</div>
      </div>
      <div class="de-links">
        {chips}
      </div>
    </div>
    """, unsafe_allow_html=True)


def footer(title: str):
    st.markdown("---")
    st.caption(f"© {datetime.now().year} {title}. {content.EDUCATIONAL_NOTICE}")
    st.caption(content.DISCLAIMER)


# ----------------- Estimator form -----------------
def init_form_state():
    for k, v in DEFAULT_DIAMOND.items():
        st.session_state.setdefault(f"form_{k}", v)


def estimator_inputs() -> Dict[str, object]:
    """Render the form fields and return the raw values keyed by field name."""
    init_form_state()
    st.subheader("Enter Diamond Details")
    st.caption(content.FORM_INTRO)

    values: Dict[str, object] = {}
    values["carat"] = st.number_input(
        FIELD_LABELS["carat"], step=CARAT_STEP, format="%.2f", key="form_carat",
        help=content.FEATURE_DESCRIPTIONS["carat"],
    )
    _field_note(validate_field("carat", values["carat"]), default=content.CARAT_HELP)

    values["cut"] = st.selectbox(FIELD_LABELS["cut"], DIAMOND_OPTIONS["cut"], key="form_cut",
                                 help=content.FEATURE_DESCRIPTIONS["cut"])
    left, right = st.columns(2)
    with left:
        values["color"] = st.selectbox(FIELD_LABELS["color"], DIAMOND_OPTIONS["color"], key="form_color",
                                       help=content.FEATURE_DESCRIPTIONS["color"])
    with right:
        values["clarity"] = st.selectbox(FIELD_LABELS["clarity"], DIAMOND_OPTIONS["clarity"], key="form_clarity",
                                         help=content.FEATURE_DESCRIPTIONS["clarity"])
    left, right = st.columns(2)
    with left:
        values["depth"] = st.number_input(f"{FIELD_LABELS['depth']} (%)", step=PROPORTION_STEP,
                                          format="%.1f", key="form_depth")
        _field_note(validate_field("depth", values["depth"]))
    with right:
        values["table"] = st.number_input(f"{FIELD_LABELS['table']} (%)", step=PROPORTION_STEP,
                                          format="%.1f", key="form_table")
        _field_note(validate_field("table", values["table"]))
    return values


def _field_note(error: Optional[str], default: Optional[str] = None):
    if error:
        st.error(error)
    elif default:
        st.caption(default)


def estimate_panel(diamond: Optional[DiamondDescription], result: Optional[PricePrediction], symbol: str = "$"):
    st.subheader("Price Estimate")
    st.caption(content.RESULT_INTRO)
    if diamond is None or result is None:
        st.info(content.RESULT_EMPTY)
        return

    st.markdown(f"""
    <div class="de-estimate">
      <div>Estimated Price</div>
      <div class="de-price">{fmt_usd(result.prediction, symbol=symbol)}</div>
      <div>Estimated Range: {fmt_usd(result.lower_bound, symbol=symbol)} - {fmt_usd(result.upper_bound, symbol=symbol)}</div>
    </div>
    """, unsafe_allow_html=True)

    st.markdown("**Diamond Specifications**")
    rows = [
        ("carat", diamond.carat), ("cut", diamond.cut), ("color", diamond.color),
        ("clarity", diamond.clarity), ("depth", fmt_percent(diamond.depth)), ("table", fmt_percent(diamond.table)),
    ]
    cols = st.columns(2)
    for i, (name, value) in enumerate(rows):
        with cols[i % 2]:
            st.caption(FIELD_LABELS[name])
            st.write(value if value is not None else "-")
    st.caption(content.ESTIMATE_FOOTNOTE)


def breakdown_section(diamond: DiamondDescription, symbol: str = "$"):
    with st.expander("Price breakdown (regression terms)", expanded=False):
        tbl = breakdown_frame(diamond)
        if tbl.empty:
            st.write("No breakdown: carat weight must be greater than 0.")
            return
        shown = tbl.copy()
        shown["Contribution (USD)"] = shown["Contribution (USD)"].apply(lambda v: fmt_usd(v, decimals=2, symbol=symbol))
        st.table(shown)
        st.caption(f"Range = estimate ± {CONFIDENCE_FRACTION * 100:.0f}% (a fixed band, not a statistical interval).")


def carat_curve_section(diamond: DiamondDescription):
    with st.expander("How carat moves the price", expanded=False):
        curve = carat_price_curve(diamond)
        st.line_chart(curve.set_index("carat")[["lower_bound", "prediction", "upper_bound"]])
        st.caption("Other characteristics held at the values entered above.")


def factor_impact():
    st.subheader("Factor Impact on Price")
    st.caption(content.FACTOR_IMPACT_INTRO)
    for name, importance, description in content.ranked_factors():
        color = FACTOR_COLORS.get(name, DEFAULT_FACTOR_COLOR)
        st.markdown(f"**{name.capitalize()}**", help=description)
        st.markdown(
            f'<div class="de-bar"><div style="width:{importance}%;background:{color}"></div></div>',
            unsafe_allow_html=True,
        )
        left, right = st.columns(2)
        left.caption("Relative Impact")
        right.caption(f"{importance}%")
    st.caption(content.FACTOR_IMPACT_FOOTNOTE)


def pricing_model_reference():
    with st.expander("Pricing model (coefficients)", expanded=False):
        st.markdown(
            "Price = intercept + carat × w + depth × w + table × w + cut, color and clarity offsets. "
            "Baseline grades (Fair, J, I1) add nothing."
        )
        st.dataframe(coefficient_frame(), use_container_width=True, hide_index=True)


# ----------------- Learn / About -----------------
def learn_page():
    st.title(content.LEARN_TITLE)
    st.caption(content.LEARN_SUBTITLE)

    cols = st.columns(2)
    for i, card in enumerate(content.LEARNING_CARDS):
        with cols[i % 2]:
            with st.container(border=True):
                st.markdown(f"### {card.icon} {card.title}")
                st.write(card.description)
                st.markdown("**Key Points:**")
                st.markdown("\n".join(f"- {p}" for p in card.key_points))

    st.header("Frequently Asked Questions")
    for question, answer in content.FAQS:
        with st.expander(question):
            st.write(answer)

    st.subheader("Further Learning Resources")
    st.write("Explore these trusted resources to deepen your understanding of diamonds:")
    for name, url in content.LEARNING_RESOURCES.items():
        st.markdown(f"- [{name}]({url})")


def about_page():
    st.title(content.ABOUT_TITLE)
    st.caption(content.ABOUT_SUBTITLE)

    cols = st.columns(len(content.ABOUT_SECTIONS))
    for col, (icon, heading, body) in zip(cols, content.ABOUT_SECTIONS):
        with col:
            with st.container(border=True):
                st.markdown(f"### {icon} {heading}")
                st.write(body)

    st.header("The Diamond Dataset")
    st.write(content.DATASET_INTRO)
    left, right = st.columns(2)
    half = (len(content.DATASET_FEATURES) + 1) // 2
    left.markdown("\n".join(f"- {f}" for f in content.DATASET_FEATURES[:half]))
    right.markdown("\n".join(f"- {f}" for f in content.DATASET_FEATURES[half:]))
    st.write(content.DATASET_OUTRO)

    st.header("Methodology")
    st.write("Our price estimation model was developed using the following process:")
    st.markdown("\n".join(f"1. **{step}:** {body}" for step, body in content.METHODOLOGY))
    pricing_model_reference()
