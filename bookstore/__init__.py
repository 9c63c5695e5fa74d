"""
Bookstore Platform

REST backend for books, customers and orders, plus an async client with
list views over the API.
"""
__version__ = "1.0.0"
