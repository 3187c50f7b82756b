"""GeoAttend package.

Geofenced attendance tracking organized by feature modules (settings,
employees, attendance, reports, anomaly) with thin Flask controllers on top of
service/repository layers.
"""
