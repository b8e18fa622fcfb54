"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs and constants
    ├── models.py         # Pydantic models for the response shape
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions never return raw dicts. They go through
``validation.require_json`` (network/JSON failures -> ``FetchError``) and
``validation.decode`` (shape mismatch -> ``DecodeError``).

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.
   See ``news/`` for a minimal example, ``reddit/`` for one with
   post-processing.

2. Write a fetch function that returns a model::

       from tribune.datasources.validation import decode, require_json

       def fetch_something(api_key: str) -> Something:
           data = require_json("something", API_URL, {"key": api_key})
           return decode(Something, data, "something")

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add a field to ``schemas.Edition``, a ``@task`` in ``flows/fetch.py`` and
   a renderer in ``renderers/``.

5. Add tests in ``tests/test_{name}.py``.
"""
