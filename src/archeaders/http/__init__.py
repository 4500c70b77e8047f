"""src/archeaders/http/__init__.py"""
