"""Application layer – the data masking use-cases and their ports."""
