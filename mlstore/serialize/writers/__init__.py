"""Format writers; each module registers its plug-ins on import."""
