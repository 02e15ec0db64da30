"""
Withdrawal form.

Run with:
    streamlit run backend/src/atm_withdrawal/ui/form.py

Talks to the API at API_BASE_URL (default http://localhost:8000/api).
"""

import streamlit as st

from atm_withdrawal.client import WithdrawalApiClient, WithdrawalApiError
from atm_withdrawal.config import get_settings
from atm_withdrawal.domain.currency import Currency
from atm_withdrawal.ui.formatting import (
    AmountInputError,
    format_denominations,
    format_notes,
    note_breakdown,
    parse_amount,
)


@st.cache_resource
def get_api_client(base_url: str) -> WithdrawalApiClient:
    """One client per session server, reused across reruns."""
    return WithdrawalApiClient(base_url)


settings = get_settings()
api = get_api_client(settings.api_base_url)

st.set_page_config(page_title="ATM Withdrawal", layout="centered")

st.title("ATM Withdrawal")
st.caption("Enter amount to withdraw")

# Prefer the server's view of currency and notes; fall back to local settings
try:
    config = api.get_config()
    currency = Currency(
        symbol=config.currency_symbol,
        name=config.currency_name,
        code=config.currency_code,
    )
    denominations = config.denominations
    max_amount = config.max_amount
except WithdrawalApiError:
    currency = settings.currency
    denominations = list(settings.denomination_set)
    max_amount = settings.max_amount

with st.form("withdrawal"):
    amount_text = st.text_input(f"Amount ({currency.symbol})", placeholder="0.00")
    submitted = st.form_submit_button("Withdraw")

if submitted:
    try:
        amount = parse_amount(amount_text)
        with st.spinner("Processing..."):
            result = api.withdraw(amount)
    except AmountInputError as e:
        st.error(str(e))
    except WithdrawalApiError as e:
        st.error(e.error.message)
    else:
        st.success("Withdrawal Successful")
        st.metric("Total Amount", currency.format(result.total_amount))
        st.markdown(f"**Notes ({result.note_count}):** {format_notes(result.notes, currency)}")

        breakdown = note_breakdown(result.notes)
        if breakdown:
            columns = st.columns(len(breakdown))
            for column, (note, count) in zip(columns, breakdown):
                column.metric(f"{currency.symbol}{note:f}", f"×{count}")

st.info(
    f"Available notes: {format_denominations(denominations, currency)}. "
    f"Maximum withdrawal: {currency.format(max_amount)}"
)
