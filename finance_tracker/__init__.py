"""Personal finance tracker reporting engine."""
