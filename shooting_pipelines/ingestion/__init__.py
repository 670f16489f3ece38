from .incident_loader import check_required_columns, is_url, load_incidents, read_csv_source
from .ingestion_master import run_ingestion

__all__ = ["check_required_columns", "is_url", "load_incidents", "read_csv_source", "run_ingestion"]
