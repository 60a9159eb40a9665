"""Host integrations that feed key events into a key map."""
