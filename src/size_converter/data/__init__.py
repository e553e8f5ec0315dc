"""Reference tables, one module per size category.

Each module exposes ``TABLES``: variant -> system code -> {token: reference value}.
"""
