"""Health dashboard service: probes the datastore and cache and reports overall status."""
