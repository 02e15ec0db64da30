"""
UI package - Streamlit withdrawal form and its display helpers.
"""
