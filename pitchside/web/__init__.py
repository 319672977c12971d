"""Flask web surface for the AI generation endpoints."""
