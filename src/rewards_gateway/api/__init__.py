"""HTTP API for the rewards gateway."""
