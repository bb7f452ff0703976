# This project was developed with assistance from AI tools.
"""LoanPath -- loan profile analysis service."""
