"""Format readers; each module registers its plug-ins on import."""
