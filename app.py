import logging

import altair as alt
import streamlit as st

from analytics.analysis import breakdown_dataframe, marginal_rate, sdlt_profile_dataframe
from config import CURRENCY_SYMBOL, DEFAULT_VALUES, SURCHARGES
from finance.bands import SDLT_BANDS, with_surcharge
from finance.errors import CalculationError
from finance.money import format_gbp
from finance.taxes import calculate_sdlt

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="UK SDLT Calculator", page_icon="🏠", layout="wide")

cur = CURRENCY_SYMBOL

# ------------------------- UI LAYOUT -------------------------

st.title("🏠 UK Stamp Duty Land Tax")

left, right = st.columns([1, 3], gap="large")

with left:
    st.markdown("### Inputs")
    price = st.number_input("Purchase price", min_value=0.0, value=DEFAULT_VALUES["price"], step=1000.0, format="%.0f", help="Price paid for the residential property")
    surcharge_key = st.selectbox(
        "Higher rates",
        list(SURCHARGES),
        format_func=lambda k: f"{k.replace('_', ' ').capitalize()} (+{SURCHARGES[k]:.0%})",
        help="Additional dwelling and non-resident surcharges are added to every band",
    )
    bands = with_surcharge(SDLT_BANDS, SURCHARGES[surcharge_key])

with right:
    try:
        res = calculate_sdlt(price, bands)
    except CalculationError as err:
        st.error(err.message)
        st.stop()

    st.markdown("### SDLT due")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Total SDLT", format_gbp(res.total), border=True)
    with c2:
        st.metric("Effective rate", f"{res.effective_rate:.2%}", border=True)
    with c3:
        st.metric("Marginal rate", f"{marginal_rate(res.property_value, bands):.0%}", border=True, help="Rate paid on the next pound of price")

    st.markdown("### Breakdown by band")
    bdf = breakdown_dataframe(res)
    if bdf.empty:
        st.caption("Nothing to pay on a zero price.")
    else:
        st.dataframe(
            bdf.drop(columns=["From", "To"]).style.format({
                "Rate": "{:.0%}",
                "Taxable": cur + "{:,.2f}",
                "Tax": cur + "{:,.2f}",
            }),
            hide_index=True,
            use_container_width=True,
        )
    st.caption("Each band's share is unrounded; only the total is rounded to the penny.")

    st.markdown("### SDLT vs Price")
    max_price = max(DEFAULT_VALUES["profile_max_price"], price * 1.25)
    pdf = sdlt_profile_dataframe(max_price, DEFAULT_VALUES["profile_points"], bands)
    line = alt.Chart(pdf).mark_line(color="#4ECDC4").encode(
        x=alt.X("Price:Q", title="Price", axis=alt.Axis(format=",.0f")),
        y=alt.Y("SDLT:Q", title="SDLT", axis=alt.Axis(format=",.0f")),
        tooltip=[
            alt.Tooltip("Price:Q", format=",.0f"),
            alt.Tooltip("SDLT:Q", format=",.2f"),
            alt.Tooltip("Effective rate:Q", format=".2%"),
            alt.Tooltip("Marginal rate:Q", format=".0%"),
        ],
    )
    rule = alt.Chart(pdf.head(1).assign(Price=res.property_value)).mark_rule(color="#FF6B6B").encode(x="Price:Q")
    st.altair_chart((line + rule).properties(height=320), use_container_width=True)
