"""Optional human-oriented renderings of coverage results."""
