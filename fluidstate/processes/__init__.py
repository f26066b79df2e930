"""Process functions that derive outlet states from inlet states."""
