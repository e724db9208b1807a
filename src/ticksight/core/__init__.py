"""Core sighting logic: severity, filtering, the record store and activity."""
