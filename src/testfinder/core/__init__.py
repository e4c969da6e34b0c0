"""Core services shared by the mapping engine and the CLI."""
