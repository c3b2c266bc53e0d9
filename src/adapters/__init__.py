"""Entry-point adapters: CLIs, report renderers, Streamlit interface."""
