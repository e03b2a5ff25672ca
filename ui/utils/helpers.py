import streamlit as st


def render_response(status, data):
    st.write("Status Code:", status)

    if status >= 400:
        st.error(data.get("error", "Request failed"))
        return False

    st.success("Analysis complete")
    return True
