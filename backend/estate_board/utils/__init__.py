# backend/estate_board/utils/__init__.py
