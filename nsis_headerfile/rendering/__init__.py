"""Header rendering and file output."""
