import streamlit as st
import pandas as pd
import io

from dmsangle.core.cache import DmsCache
from dmsangle.core.filters import dms_filter
from dmsangle.csv_handler import convert_column
from dmsangle.logging_config import configure_logging
from dmsangle.ui.field import parse_field


def _init_state():
    """Initialize session_state defaults once."""
    defaults = {
        "angle_text": "",
        "fraction_digits": 2,
        "dms_cache": DmsCache(maxsize=256),
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


# ── Single angle ─────────────────────────────────────────────
def _angle_input():
    st.header("Angle")
    with st.expander("ℹ️ Accepted formats"):
        st.markdown("""
        * Decimal degrees: `12.5`, `-33.4489`
        * Degrees, minutes, seconds with any separator: `12 30 0`, `12°30'0"`, `-70° 39' 48.6"`
        * A single `-` anywhere makes the angle negative.
        """)

    text = st.text_input("Angle (decimal or DMS)", key="angle_text")
    digits = st.number_input("Decimal places for seconds", min_value=0, max_value=9, step=1, key="fraction_digits")

    cache: DmsCache = st.session_state["dms_cache"]
    state = parse_field(text, cache=cache)
    if not state.valid:
        st.warning(f"`{text}` is not a valid angle.")
        return
    if state.value is None:
        st.info("Type an angle to convert it.")
        return

    col1, col2 = st.columns(2)
    col1.metric("Decimal degrees", f"{state.value:.9f}")
    col2.metric("DMS", dms_filter(state.value, int(digits), cache=cache))


# ── CSV column ───────────────────────────────────────────────
def _csv_conversion():
    st.header("CSV column")
    uploaded = st.file_uploader("Upload CSV", type=["csv"], key="csv")
    if not uploaded:
        return

    df = pd.read_csv(uploaded, dtype=str, keep_default_na=False)
    st.dataframe(df.head(), use_container_width=True)

    column = st.selectbox("Angle column", list(df.columns))
    target = st.radio("Convert to", ["dms", "decimal"], horizontal=True)
    if st.button("Convert"):
        try:
            result = convert_column(df, column, to=target, fraction_digits=int(st.session_state["fraction_digits"]))
        except ValueError as e:
            st.error(str(e))
            return
        st.dataframe(result, use_container_width=True)
        buf = io.StringIO()
        result.to_csv(buf, index=False)
        st.download_button("Download CSV", buf.getvalue(), file_name="angles_converted.csv", mime="text/csv")


def main():
    configure_logging()
    st.set_page_config(page_title="dmsangle", layout="wide")
    _init_state()
    _angle_input()
    st.markdown("---")
    _csv_conversion()


if __name__ == "__main__":
    main()
