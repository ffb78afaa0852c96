"""Natural-disaster event aggregation from the USGS and NASA EONET feeds."""

__version__ = "0.1.0"
