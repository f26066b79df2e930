"""State definition, caching and CoolProp access."""
