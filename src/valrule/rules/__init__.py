"""Rules layer — the validation rule contract and its implementations."""
