"""Tribune - a one-page morning paper for a thermal printer.

Architecture::

    datasources/   External APIs (Open-Meteo, Twelve Data, NYT, reddit)
    renderers/     Pure data -> fixed-width text blocks
    flows/         Prefect orchestration (fetch pulls sources, build assembles and prints)
    services/      Shared utilities (HTTP fetcher, print sink)

Data flow: datasources -> schemas.Edition -> renderers -> report -> printer
"""

__version__ = "0.1.0"

from tribune.config import Settings
from tribune.schemas import Edition

__all__ = ["Edition", "Settings", "__version__"]
