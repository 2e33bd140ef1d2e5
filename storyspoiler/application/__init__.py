"""Application layer: authenticated session setup and the story scenario."""
