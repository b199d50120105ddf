"""Pure combat rules and domain models."""
