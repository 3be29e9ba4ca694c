"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Recipe API communication
- state: Session state management helpers
"""
