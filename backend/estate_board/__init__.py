# backend/estate_board/__init__.py
__version__ = "0.1.0"
