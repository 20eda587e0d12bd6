"""Infrastructure layer: MongoDB connection and repository implementations."""
