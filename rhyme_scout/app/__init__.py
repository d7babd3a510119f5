"""Application layer: API client, search service and user interfaces."""
