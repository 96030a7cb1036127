"""Internal helpers for docnav."""
