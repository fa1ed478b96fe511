"""core

Pure game domain for Number Guess (no Streamlit imports here).
"""
