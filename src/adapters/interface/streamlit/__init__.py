"""Streamlit user interface for the PathTwo dashboard."""

__all__ = []
