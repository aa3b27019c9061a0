"""Environment variable overlay adapter."""
