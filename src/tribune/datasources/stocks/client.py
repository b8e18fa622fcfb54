"""Twelve Data quote API constants.

API docs: https://twelvedata.com/docs#quote
"""

QUOTE_API = "https://api.twelvedata.com/quote"
