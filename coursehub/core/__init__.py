"""Core domain logic: exceptions and the platform projection sync engine."""
