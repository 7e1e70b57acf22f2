"""
Utility modules for the Streamlit frontend.

This package contains:
- controllers: Recipe service and fetch controller wiring on top of session_state
"""
