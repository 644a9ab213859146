"""Core join algorithms: capability-probing writers and size accounting."""
