from .innerscan import RAW_TIMESTAMP_FORMAT, merge_readings, parse_raw_timestamp

__all__ = ["RAW_TIMESTAMP_FORMAT", "merge_readings", "parse_raw_timestamp"]
