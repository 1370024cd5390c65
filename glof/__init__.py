"""GLOF Sentinel: glacial-lake outburst-flood risk monitoring."""
