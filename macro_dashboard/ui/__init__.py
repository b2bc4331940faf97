"""Chart rendering and the Streamlit dashboard."""
