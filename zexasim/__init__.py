"""
zexasim - ZEXABOX Rental/Resale Investment Simulator

Projects rental income, resale payouts and upgrade decisions for a
rental-then-resale hardware investment scheme over a 24-month horizon.

Modules:
    - core: Exceptions, logging and settings
    - domain: Product catalog, Pydantic models and the projection engine
    - application: Planner and simulation services
    - ui: Streamlit pages and UI components
"""

__version__ = "1.2.0"
