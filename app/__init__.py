"""Streamlit entry point."""
