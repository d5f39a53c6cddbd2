"""linediff API - diff engine, hunk builder, line pairing and rendering."""
