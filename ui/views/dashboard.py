import streamlit as st
import json
from api.client import post
from analytics.breakdown import category_shares, spending_flags
from utils.helpers import render_response


def render():

    st.set_page_config(layout="wide")

    st.title("UPI MONTHLY LOG")

    raw = st.text_area("Transaction Log (JSON array)", height=250)

    if not raw:
        st.info("Paste a transaction log to begin analysis.")
        return

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        st.error(f"Invalid JSON: {exc}")
        return

    status, report = post("transactions:analyze", payload)
    if not render_response(status, report):
        return

    # =====================================================
    # SUMMARY
    # =====================================================

    col1, col2, col3, col4 = st.columns(4)

    col1.metric("Total Credit", report["totalCredit"])
    col2.metric("Total Debit", report["totalDebit"])
    col3.metric("Net Balance", report["netBalance"])
    col4.metric("Transactions", report["transactionCount"])

    colA, colB = st.columns(2)
    colA.metric("Average Transaction", report["avgTransaction"])
    colB.metric("Frequent Contact", report["frequentContact"])

    st.divider()

    # =====================================================
    # Category Breakdown
    # =====================================================
    st.subheader("Category Breakdown")

    st.bar_chart(report["categoryBreakdown"])

    for category, share in category_shares(report).items():
        st.write(f"{category}: {share}%")

    st.divider()

    # =====================================================
    # Highest Transaction
    # =====================================================
    st.subheader("Highest Transaction")

    st.json(report["highestTransaction"])

    st.divider()

    # =====================================================
    # Flags
    # =====================================================
    st.subheader("Flags")

    flags = spending_flags(report)
    if not flags:
        st.success("Nothing unusual this month.")
    for flag in flags:
        st.warning(flag)
