"""GraphQL API for Fence."""
