"""New York Times Most Popular API constants.

API docs: https://developer.nytimes.com/docs/most-popular-product/1/overview
"""

# Most viewed articles over the last day
MOST_VIEWED_API = "https://api.nytimes.com/svc/mostpopular/v2/viewed/1.json"
