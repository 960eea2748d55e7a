"""Feature packages: the entity model and payload decoding."""
