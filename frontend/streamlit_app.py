"""
Streamlit Frontend for the Password Policy Service
Check a password against the policy as you type, or generate a compliant one
"""
import streamlit as st
import requests
import os
from typing import Dict, Any, List, Optional

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
REQUEST_TIMEOUT = 10

# Page config
st.set_page_config(
    page_title="Password Policy",
    page_icon="🔐",
    layout="centered",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: bold;
        color: #1f77b4;
        text-align: center;
        margin-bottom: 1rem;
    }
    .violation {
        padding: 0.5rem 1rem;
        border-radius: 0.5rem;
        margin-bottom: 0.5rem;
        background-color: #ffebee;
        border-left: 4px solid #f44336;
    }
    .accepted {
        padding: 0.5rem 1rem;
        border-radius: 0.5rem;
        background-color: #e8f5e9;
        border-left: 4px solid #4caf50;
    }
</style>
""", unsafe_allow_html=True)

# Initialize session state
if 'generated_password' not in st.session_state:
    st.session_state.generated_password = None


def fetch_rules() -> List[Dict[str, Any]]:
    """Fetch the rule list from the API"""
    try:
        response = requests.get(f"{API_BASE_URL}/rules", timeout=REQUEST_TIMEOUT)
        if response.status_code == 200:
            return response.json()
        return []
    except requests.RequestException as e:
        st.error(f"Connection error: {e}")
        return []


def check_password(password: str, old_password: str, user_info: Dict[str, str]) -> Optional[Dict[str, Any]]:
    """Send a password to the validation endpoint"""
    payload = {
        "password": password,
        "user_info": user_info,
        "old_password": old_password or None,
    }
    try:
        response = requests.post(
            f"{API_BASE_URL}/password/validate",
            json=payload,
            timeout=REQUEST_TIMEOUT
        )
        if response.status_code == 200:
            return response.json()
        st.error(f"Error: {response.text}")
        return None
    except requests.RequestException as e:
        st.error(f"Connection error: {e}")
        return None


def request_password(min_length: int, max_length: int) -> Optional[str]:
    """Ask the API for a generated password"""
    try:
        response = requests.post(
            f"{API_BASE_URL}/password/generate",
            json={"min_length": min_length, "max_length": max_length},
            timeout=REQUEST_TIMEOUT
        )
        if response.status_code == 200:
            return response.json()["password"]
        st.error(f"Error: {response.json().get('detail', response.text)}")
        return None
    except requests.RequestException as e:
        st.error(f"Connection error: {e}")
        return None


# Sidebar
with st.sidebar:
    st.markdown("### 👤 Account")
    st.caption("Optional. The password must not contain these.")
    email = st.text_input("Email")
    first_name = st.text_input("First name")
    last_name = st.text_input("Last name")
    user_name = st.text_input("User name")

    st.markdown("---")

    st.markdown("### 📋 Rules")
    for rule in fetch_rules():
        st.caption(f"{rule['number']}. {rule['description']}")

# Main content
st.markdown('<div class="main-header">🔐 Password Policy</div>', unsafe_allow_html=True)

password = st.text_input("New password", type="password")
old_password = st.text_input("Old password (optional)", type="password")

if password:
    result = check_password(
        password,
        old_password,
        {
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "user_name": user_name,
        }
    )
    if result is not None:
        if result["valid"]:
            st.markdown('<div class="accepted">✅ Password accepted</div>', unsafe_allow_html=True)
        else:
            for message in result["errors"]:
                st.markdown(f'<div class="violation">❌ {message}</div>', unsafe_allow_html=True)

st.markdown("---")

# Generator
st.markdown("### 🎲 Generate a password")
col1, col2 = st.columns(2)
with col1:
    min_length = st.number_input("Minimum length", min_value=6, max_value=18, value=6)
with col2:
    max_length = st.number_input("Maximum length", min_value=6, max_value=18, value=18)

if st.button("Generate", type="primary"):
    with st.spinner("Generating..."):
        st.session_state.generated_password = request_password(int(min_length), int(max_length))

if st.session_state.generated_password:
    st.code(st.session_state.generated_password, language=None)
