"""Service layer that turns club data into generation requests."""
