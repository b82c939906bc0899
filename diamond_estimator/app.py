# Diamond Price Estimator (Streamlit App)
#
# Pages
# -----
# - Estimate: form with live validation, point estimate with ±15% range, specification summary,
#   per-term price breakdown, carat sensitivity chart, factor impact bars, PDF download.
# - Learn: the 4Cs, FAQ and further resources.
# - About: how the regression model was built.
#
# Run with `diamond-estimator` or `streamlit run diamond_estimator/app.py`.

import logging

import streamlit as st

from diamond_estimator import content, ui
from diamond_estimator.logging_config import configure_logging
from diamond_estimator.pdf import build_estimate_pdf
from diamond_estimator.pricing import DiamondDescription, predict_price
from diamond_estimator.settings import get_settings
from diamond_estimator.validation import validate_diamond

logger = logging.getLogger("diamond_estimator.app")

PAGES = ["Estimate", "Learn", "About"]


def _estimate_page(symbol: str, title: str):
    form_col, result_col = st.columns(2, gap="large")

    with form_col:
        values = ui.estimator_inputs()
        errors = validate_diamond(values)
        # Clicking reruns the script, which recalculates below
        st.button("Calculate Estimate", type="primary", use_container_width=True, disabled=bool(errors))

    # Recalculate whenever the form is valid; keep the last good estimate otherwise
    if not errors:
        diamond = DiamondDescription.from_mapping(values)
        result = predict_price(diamond)
        st.session_state["estimate"] = (diamond, result)
        logger.info("Estimate %s -> %s", diamond.to_dict(), result.to_dict())
    else:
        logger.debug("Form invalid: %s", errors)

    diamond, result = st.session_state.get("estimate", (None, None))
    with result_col:
        ui.estimate_panel(diamond, result, symbol=symbol)
        if diamond is not None:
            pdf_bytes = build_estimate_pdf(diamond, result, title=title, symbol=symbol)
            st.download_button("Download estimate (PDF)", data=pdf_bytes,
                               file_name="diamond_estimate.pdf", mime="application/pdf")

    if diamond is not None:
        ui.breakdown_section(diamond, symbol=symbol)
        ui.carat_curve_section(diamond)

    st.markdown("---")
    ui.factor_impact()


def main():
    settings = get_settings()
    configure_logging(settings)

    # must be called before any other st.* call to set layout properly
    st.set_page_config(layout="wide", page_title=settings.title, page_icon="💎")
    ui.inject_global_css()
    ui.top_navbar(settings.title)

    page = st.sidebar.radio("Navigate", PAGES, index=0)
    st.sidebar.caption(content.DISCLAIMER)

    if page == "Estimate":
        st.title(settings.title)
        st.caption(content.APP_TAGLINE)
        _estimate_page(settings.currency_symbol, settings.title)
    elif page == "Learn":
        ui.learn_page()
    else:
        ui.about_page()

    ui.footer(settings.title)


if __name__ == "__main__":
    main()
