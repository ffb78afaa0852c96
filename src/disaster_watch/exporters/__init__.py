"""Exporters for aggregated disaster events."""

from disaster_watch.exporters.csv_export import export_csv
from disaster_watch.exporters.geojson_export import export_geojson
from disaster_watch.exporters.json_export import event_record, export_json

__all__ = ["event_record", "export_csv", "export_geojson", "export_json"]
