"""
UI components for the Recipe AI Streamlit app.

Each module renders one part of the page from the controller's state and
turns widget interactions into controller intents.
"""
