"""HTTP host for the Fence GraphQL API."""
